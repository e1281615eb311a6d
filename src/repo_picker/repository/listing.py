"""
Repository enumeration strategies.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..config import GitHubConfig
from ..error_handling import EmptyInputError, NoRepositoriesError
from ..models import RepositoryRef
from .capabilities import Capabilities
from .gh_cli import GhCli
from .github_client import GitHubClient

logger = logging.getLogger(__name__)


class RepositoryLister(ABC):
    """Base class for the ways an account's repositories can be listed."""

    source = "unknown"
    announcement = ""

    @abstractmethod
    def list_repositories(self, account: str) -> List[str]:
        """
        Return raw ``owner/name`` identifiers for an account.

        Raises:
            EnumerationError: If the source cannot be read
        """
        pass


class GhCliLister(RepositoryLister):
    """Lists through the authenticated GitHub CLI, private repositories included."""

    source = "gh"
    announcement = "Using authenticated GitHub CLI to retrieve repositories…"

    def __init__(self, gh: GhCli, limit: int):
        self.gh = gh
        self.limit = limit

    def list_repositories(self, account: str) -> List[str]:
        return self.gh.list_repositories(account, self.limit)


class PublicApiLister(RepositoryLister):
    """Lists public repositories through one unauthenticated REST call."""

    source = "api"
    announcement = "GitHub CLI not available/authenticated — falling back to public repos."

    def __init__(self, client: GitHubClient, per_page: int):
        self.client = client
        self.per_page = per_page

    def list_repositories(self, account: str) -> List[str]:
        return self.client.list_user_repositories(account, self.per_page)


def select_lister(capabilities: Capabilities, config: GitHubConfig, gh: GhCli) -> RepositoryLister:
    """
    Pick exactly one listing strategy for this run.

    Args:
        capabilities: Result of the startup probe
        config: GitHub configuration
        gh: GitHub CLI wrapper, only used when authenticated

    Returns:
        The strategy to use
    """
    if capabilities.use_gh_cli:
        return GhCliLister(gh, config.page_size)

    client = GitHubClient(base_url=config.api_base_url, timeout=config.timeout)
    return PublicApiLister(client, config.page_size)


def normalize_account(account: str) -> str:
    """
    Strip an account name and reject it if nothing is left.

    Raises:
        EmptyInputError: If the name is empty or whitespace only
    """
    account = (account or "").strip()
    if not account:
        raise EmptyInputError()
    return account


def enumerate_repositories(lister: RepositoryLister, account: str) -> List[RepositoryRef]:
    """
    List, de-duplicate and sort an account's repositories.

    Args:
        lister: Strategy chosen by ``select_lister``
        account: Account name as typed by the user

    Returns:
        Repositories sorted lexicographically by ``owner/name``

    Raises:
        EmptyInputError: If the account name is blank
        EnumerationError: If the source fails
        NoRepositoriesError: If nothing was found
    """
    account = normalize_account(account)

    identifiers = lister.list_repositories(account)
    logger.info(f"{lister.source} returned {len(identifiers)} repositories for {account}")

    unique = {RepositoryRef.parse(identifier) for identifier in identifiers}
    repositories = sorted(unique, key=lambda ref: ref.full_name)
    if len(repositories) < len(identifiers):
        logger.debug(f"Dropped {len(identifiers) - len(repositories)} duplicate identifiers")

    if not repositories:
        raise NoRepositoriesError(account)

    return repositories
