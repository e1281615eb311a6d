"""
Shared fixtures for the repo picker tests.
"""

import shutil
from pathlib import Path
from typing import Iterable, List

import pytest
from git import Actor, Repo

from repo_picker.config import reset_config_manager
from repo_picker.logging import close_logging

CONFIG_ENV_VARS = (
    "GITHUB_HOST", "GITHUB_API_URL", "REPO_PICKER_PAGE_SIZE", "GH_EXECUTABLE",
    "REPO_PICKER_WORKDIR", "LOG_LEVEL", "LOG_FILE", "LOG_STRUCTURED"
)

AUTHOR = Actor("Test Author", "author@example.com")

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration and logging."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    close_logging()
    reset_config_manager()


@pytest.fixture
def fake_path(monkeypatch):
    """
    Control which executables ``shutil.which`` can find.

    Returns a function taking the tool names that should be present.
    """
    def install(tools: Iterable[str]) -> List[str]:
        present = list(tools)

        def which(cmd, *args, **kwargs):
            return f"/usr/bin/{cmd}" if cmd in present else None

        monkeypatch.setattr(shutil, "which", which)
        return present

    return install


def commit_file(repo: Repo, name: str, content: str, message: str) -> str:
    """Write a file into a working tree, commit it and return the sha."""
    path = Path(repo.working_tree_dir) / name
    path.write_text(content)
    repo.index.add([name])
    commit = repo.index.commit(message, author=AUTHOR, committer=AUTHOR)
    return commit.hexsha


@pytest.fixture
def upstream(tmp_path) -> Repo:
    """A local repository with one commit, standing in for the GitHub remote."""
    repo = Repo.init(tmp_path / "upstream")
    commit_file(repo, "README.md", "hello\n", "Initial commit")
    yield repo
    repo.close()
