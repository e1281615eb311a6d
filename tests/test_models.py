from pathlib import Path

import pytest

from repo_picker.error_handling import InvalidRepositoryIdentifierError
from repo_picker.models import RepositoryRef, MaterializationResult


def test_parse_identifier():
    ref = RepositoryRef.parse("alice/zebra")

    assert ref.owner == "alice"
    assert ref.name == "zebra"
    assert ref.full_name == "alice/zebra"
    assert str(ref) == "alice/zebra"


@pytest.mark.parametrize("identifier", ["", "alice", "alice/", "/zebra", "a/b/c", None, 42])
def test_parse_rejects_malformed_identifiers(identifier):
    with pytest.raises(InvalidRepositoryIdentifierError):
        RepositoryRef.parse(identifier)


def test_local_directory_uses_short_name(tmp_path):
    ref = RepositoryRef.parse("alice/m")

    assert ref.local_directory() == Path("m")
    assert ref.local_directory(tmp_path) == tmp_path / "m"


def test_ssh_url():
    ref = RepositoryRef.parse("alice/m")

    assert ref.ssh_url() == "git@github.com:alice/m.git"
    assert ref.ssh_url("ghe.example.com", "deploy") == "deploy@ghe.example.com:alice/m.git"


def test_equal_identifiers_collapse_in_a_set():
    refs = {RepositoryRef.parse("alice/a"), RepositoryRef.parse("alice/a")}

    assert len(refs) == 1


def test_materialization_result_changed():
    ref = RepositoryRef.parse("alice/a")

    same = MaterializationResult(ref, Path("a"), "updated", "abc", "abc")
    moved = MaterializationResult(ref, Path("a"), "updated", "abc", "def")

    assert not same.changed
    assert moved.changed
