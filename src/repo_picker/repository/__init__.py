"""
GitHub access and local working copy management.
"""

from .capabilities import Capabilities, CapabilityProbe, check_prerequisites
from .gh_cli import GhCli
from .github_client import GitHubClient
from .listing import (
    RepositoryLister, GhCliLister, PublicApiLister,
    select_lister, normalize_account, enumerate_repositories
)
from .repository_manager import RepositoryManager

__all__ = [
    "Capabilities",
    "CapabilityProbe",
    "check_prerequisites",
    "GhCli",
    "GitHubClient",
    "RepositoryLister",
    "GhCliLister",
    "PublicApiLister",
    "select_lister",
    "normalize_account",
    "enumerate_repositories",
    "RepositoryManager"
]
