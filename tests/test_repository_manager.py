from pathlib import Path

import pytest
from git import Repo

from repo_picker.error_handling import MaterializationError
from repo_picker.models import RepositoryRef
from repo_picker.repository import RepositoryManager
from repo_picker.repository import repository_manager as manager_module

from .conftest import commit_file, requires_git

pytestmark = requires_git

REPO = RepositoryRef.parse("alice/m")


@pytest.fixture
def workdir(tmp_path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def clone_calls(monkeypatch, upstream):
    """
    Redirect SSH clones to the local upstream repository.

    Records the URL and target path each clone was asked for.
    """
    calls = []
    real_clone_from = Repo.clone_from

    def clone_from(url, to_path, **kwargs):
        calls.append((url, Path(to_path)))
        return real_clone_from(upstream.working_tree_dir, to_path, **kwargs)

    monkeypatch.setattr(manager_module.Repo, "clone_from", clone_from)
    return calls


@pytest.fixture
def working_copy(workdir, upstream) -> Repo:
    repo = upstream.clone(str(workdir / REPO.name))
    yield repo
    repo.close()


def test_missing_directory_is_cloned_over_ssh(workdir, upstream, clone_calls):
    manager = RepositoryManager(workdir)

    result = manager.materialize(REPO)

    assert clone_calls == [("git@github.com:alice/m.git", workdir / "m")]
    assert result.action == "cloned"
    assert result.path == workdir / "m"
    assert result.new_commit == upstream.head.commit.hexsha
    assert (workdir / "m" / ".git").is_dir()


def test_clone_url_follows_configuration(workdir, clone_calls):
    RepositoryManager(workdir, host="ghe.example.com", ssh_user="deploy").materialize(REPO)

    assert clone_calls[0][0] == "deploy@ghe.example.com:alice/m.git"


def test_directory_without_git_metadata_is_cloned_not_pulled(workdir, clone_calls, monkeypatch):
    (workdir / "m").mkdir()
    manager = RepositoryManager(workdir)
    monkeypatch.setattr(manager, "update_repository", pytest.fail)

    # git clones into an existing empty directory
    result = manager.materialize(REPO)

    assert result.action == "cloned"
    assert len(clone_calls) == 1


def test_existing_working_copy_is_fast_forwarded(workdir, upstream, working_copy, clone_calls):
    old_head = working_copy.head.commit.hexsha
    new_head = commit_file(upstream, "CHANGES.md", "more\n", "Second commit")

    result = RepositoryManager(workdir).materialize(REPO)

    assert clone_calls == []
    assert result.action == "updated"
    assert result.old_commit == old_head
    assert result.new_commit == new_head
    assert result.changed
    assert (workdir / "m" / "CHANGES.md").read_text() == "more\n"


def test_up_to_date_working_copy(workdir, working_copy, clone_calls):
    result = RepositoryManager(workdir).materialize(REPO)

    assert result.action == "updated"
    assert not result.changed
    assert clone_calls == []


def test_diverged_working_copy_is_not_merged(workdir, upstream, working_copy, clone_calls):
    local_head = commit_file(working_copy, "local.txt", "mine\n", "Local work")
    commit_file(upstream, "remote.txt", "theirs\n", "Remote work")

    with pytest.raises(MaterializationError) as excinfo:
        RepositoryManager(workdir).materialize(REPO)

    assert excinfo.value.operation == "pull"
    assert excinfo.value.repository == "alice/m"
    assert excinfo.value.message
    assert clone_calls == []

    working_copy = Repo(workdir / "m")
    assert working_copy.head.commit.hexsha == local_head
    assert len(working_copy.head.commit.parents) == 1
    assert not (workdir / "m" / "remote.txt").exists()
    working_copy.close()


def test_failed_clone_raises(workdir, monkeypatch):
    manager = RepositoryManager(workdir)
    missing = workdir.parent / "does-not-exist"
    real_clone_from = Repo.clone_from

    monkeypatch.setattr(
        manager_module.Repo, "clone_from",
        lambda url, to_path, **kwargs: real_clone_from(str(missing), to_path, **kwargs)
    )

    with pytest.raises(MaterializationError) as excinfo:
        manager.materialize(REPO)

    assert excinfo.value.operation == "clone"
