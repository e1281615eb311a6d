"""
Repository data models.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..error_handling import InvalidRepositoryIdentifierError


@dataclass(frozen=True)
class RepositoryRef:
    """A GitHub repository identified by ``owner/name``."""

    owner: str
    name: str

    @classmethod
    def parse(cls, identifier: str) -> 'RepositoryRef':
        """
        Build a reference from an ``owner/name`` identifier.

        Args:
            identifier: Identifier as returned by the GitHub CLI or API

        Returns:
            RepositoryRef instance

        Raises:
            InvalidRepositoryIdentifierError: If the identifier is malformed
        """
        if not isinstance(identifier, str):
            raise InvalidRepositoryIdentifierError(identifier)
        parts = identifier.strip().split('/')
        if len(parts) != 2 or not all(parts):
            raise InvalidRepositoryIdentifierError(identifier)
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        """Get the full repository name (owner/repo)."""
        return f"{self.owner}/{self.name}"

    def local_directory(self, base: Union[str, Path] = ".") -> Path:
        """Directory the working copy lives in, named after the short name."""
        return Path(base) / self.name

    def ssh_url(self, host: str = "github.com", user: str = "git") -> str:
        """SCP-style SSH remote, e.g. ``git@github.com:owner/name.git``."""
        return f"{user}@{host}:{self.full_name}.git"

    def __str__(self) -> str:
        return self.full_name


@dataclass
class MaterializationResult:
    """Outcome of cloning or updating a working copy."""

    repository: RepositoryRef
    path: Path
    action: str  # cloned, updated
    old_commit: Optional[str] = None
    new_commit: Optional[str] = None

    @property
    def changed(self) -> bool:
        """True when the working copy now points at a different commit."""
        return self.old_commit != self.new_commit
