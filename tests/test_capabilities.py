import subprocess

import pytest

from repo_picker.error_handling import MissingPrerequisiteError
from repo_picker.repository import Capabilities, CapabilityProbe, GhCli, check_prerequisites


def completed(returncode, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_capabilities_require_both_checks():
    assert Capabilities(True, True).use_gh_cli
    assert not Capabilities(True, False).use_gh_cli
    assert not Capabilities(False, False).use_gh_cli


def test_prerequisites_present(fake_path):
    fake_path(["git"])

    check_prerequisites(["git"])


def test_missing_prerequisite_names_the_tool(fake_path):
    fake_path(["git"])

    with pytest.raises(MissingPrerequisiteError) as excinfo:
        check_prerequisites(["git", "ssh"])

    assert excinfo.value.tool == "ssh"
    assert excinfo.value.message == "'ssh' is required but not found."


def test_probe_without_gh(fake_path, monkeypatch):
    fake_path(["git"])
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: calls.append(a))

    capabilities = CapabilityProbe(GhCli()).probe()

    assert capabilities == Capabilities(gh_available=False, gh_authenticated=False)
    assert calls == []


def test_probe_with_authenticated_gh(fake_path, monkeypatch):
    fake_path(["git", "gh"])
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        return completed(0)

    monkeypatch.setattr(subprocess, "run", run)

    capabilities = CapabilityProbe(GhCli(host="github.com")).probe()

    assert capabilities.use_gh_cli
    assert calls == [["/usr/bin/gh", "auth", "status", "-h", "github.com"]]


def test_probe_with_logged_out_gh(fake_path, monkeypatch):
    fake_path(["gh"])
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: completed(1, stderr="not logged in"))

    capabilities = CapabilityProbe(GhCli()).probe()

    assert capabilities.gh_available
    assert not capabilities.gh_authenticated
    assert not capabilities.use_gh_cli


def test_probe_survives_gh_that_cannot_start(fake_path, monkeypatch):
    fake_path(["gh"])

    def run(cmd, **kwargs):
        raise PermissionError(cmd[0])

    monkeypatch.setattr(subprocess, "run", run)

    assert not CapabilityProbe(GhCli()).probe().use_gh_cli
