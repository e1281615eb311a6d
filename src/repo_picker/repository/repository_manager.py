"""
Repository manager for cloning and updating local working copies.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from git import Repo, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..error_handling import MaterializationError
from ..models import RepositoryRef, MaterializationResult

logger = logging.getLogger(__name__)


class RepositoryManager:
    """
    Makes sure a working copy of a repository exists and is up to date.

    A directory named after the repository that contains ``.git`` is
    updated with a fast-forward-only pull; anything else is cloned over
    SSH. Updates never merge or rewrite history, and a failed clone is
    left exactly as git left it.
    """

    def __init__(
        self,
        workdir: Union[str, Path] = ".",
        host: str = "github.com",
        ssh_user: str = "git"
    ):
        """
        Initialize repository manager.

        Args:
            workdir: Directory working copies are created in
            host: SSH host to clone from
            ssh_user: SSH user for the clone URL
        """
        self.workdir = Path(workdir)
        self.host = host
        self.ssh_user = ssh_user

    def local_path(self, repository: RepositoryRef) -> Path:
        return repository.local_directory(self.workdir)

    def has_working_copy(self, repository: RepositoryRef) -> bool:
        """True if the target directory holds git metadata."""
        return (self.local_path(repository) / ".git").is_dir()

    def materialize(self, repository: RepositoryRef) -> MaterializationResult:
        """
        Update the working copy if present, otherwise clone it.

        Raises:
            MaterializationError: If git fails
        """
        if self.has_working_copy(repository):
            return self.update_repository(repository)
        return self.clone_repository(repository)

    def update_repository(self, repository: RepositoryRef) -> MaterializationResult:
        """
        Pull the latest changes, fast-forward only.

        Args:
            repository: Repository whose working copy to update

        Returns:
            Result with the commits before and after the pull

        Raises:
            MaterializationError: If the pull fails, including on divergence
        """
        local_path = self.local_path(repository)

        try:
            git_repo = Repo(local_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise MaterializationError(
                f"'{local_path}' is not a git working copy",
                repository=repository.full_name, operation="pull", cause=e
            )

        try:
            old_commit = self._head_sha(git_repo)
            output = git_repo.git.pull("--ff-only")
            new_commit = self._head_sha(git_repo)
        except GitCommandError as e:
            logger.error(f"Fast-forward pull failed for {repository.full_name}")
            raise MaterializationError(
                self._git_error_message(e),
                repository=repository.full_name, operation="pull", cause=e
            )
        finally:
            git_repo.close()

        if output:
            logger.info(output)

        if old_commit != new_commit:
            logger.info(f"Updated {repository.full_name}: {self._short(old_commit)} -> {self._short(new_commit)}")
        else:
            logger.info(f"Repository {repository.full_name} is already up to date")

        return MaterializationResult(
            repository=repository,
            path=local_path,
            action="updated",
            old_commit=old_commit,
            new_commit=new_commit
        )

    def clone_repository(self, repository: RepositoryRef) -> MaterializationResult:
        """
        Clone a repository over SSH into the working directory.

        Args:
            repository: Repository to clone

        Returns:
            Result with the cloned head commit

        Raises:
            MaterializationError: If the clone fails
        """
        local_path = self.local_path(repository)
        clone_url = repository.ssh_url(self.host, self.ssh_user)

        logger.info(f"Cloning {clone_url} to {local_path}")

        try:
            git_repo = Repo.clone_from(clone_url, local_path)
        except GitCommandError as e:
            logger.error(f"Git clone failed for {repository.full_name}")
            raise MaterializationError(
                self._git_error_message(e),
                repository=repository.full_name, operation="clone", cause=e
            )

        try:
            new_commit = self._head_sha(git_repo)
        finally:
            git_repo.close()

        logger.info(f"Successfully cloned repository to {local_path}")

        return MaterializationResult(
            repository=repository,
            path=local_path,
            action="cloned",
            new_commit=new_commit
        )

    def _head_sha(self, git_repo: Repo) -> Optional[str]:
        # Empty repositories have no HEAD commit
        try:
            return git_repo.head.commit.hexsha
        except ValueError:
            return None

    def _short(self, sha: Optional[str]) -> str:
        return sha[:8] if sha else "(none)"

    def _git_error_message(self, error: GitCommandError) -> str:
        """Git's own stderr, falling back to the exception text."""
        stderr = error.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode('utf-8', errors='replace')
        stderr = (stderr or "").strip()
        if stderr.startswith("stderr:"):
            stderr = stderr[len("stderr:"):].strip().strip("'").strip()
        return stderr or str(error)
