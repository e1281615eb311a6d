"""
Orchestration of the pick-then-clone-or-update workflow.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, get_config
from .menu import choose
from .models import RepositoryRef, MaterializationResult
from .repository import (
    Capabilities, CapabilityProbe, GhCli, RepositoryLister, RepositoryManager,
    check_prerequisites, enumerate_repositories, select_lister
)

logger = logging.getLogger(__name__)


class RepoPicker:
    """
    Runs the four steps of a session in order.

    1. ``prepare``: check required tools and probe the GitHub CLI
    2. ``fetch``: list the account's repositories
    3. ``select``: turn a menu reply into a repository
    4. ``materialize``: clone or fast-forward the working copy

    Each step raises a ``RepoPickerError`` subclass on failure; nothing is
    retried. The probe result is kept on the instance so later steps never
    look at the environment again.
    """

    def __init__(self, config: Optional[AppConfig] = None, gh: Optional[GhCli] = None):
        """
        Initialize the picker.

        Args:
            config: Application configuration
            gh: GitHub CLI wrapper, built from the configuration if omitted
        """
        self.config = config or get_config()
        self.gh = gh or GhCli(self.config.github.gh_executable, self.config.github.host)
        self.repository_manager = RepositoryManager(
            workdir=self.config.workspace.directory,
            host=self.config.github.host,
            ssh_user=self.config.github.ssh_user
        )
        self.capabilities: Optional[Capabilities] = None
        self.lister: Optional[RepositoryLister] = None

    def prepare(self) -> RepositoryLister:
        """
        Check prerequisites and choose the listing strategy.

        Returns:
            The strategy every later listing will use
        """
        check_prerequisites(self.config.workspace.required_tools)

        self.capabilities = CapabilityProbe(self.gh).probe()
        self.lister = select_lister(self.capabilities, self.config.github, self.gh)
        logger.info(f"Listing repositories with: {self.lister.source}")
        return self.lister

    def fetch(self, account: str) -> List[RepositoryRef]:
        if self.lister is None:
            self.prepare()
        return enumerate_repositories(self.lister, account)

    def select(self, repositories: List[RepositoryRef], raw: str) -> RepositoryRef:
        chosen = choose(repositories, raw)
        logger.info(f"Selected {chosen.full_name}")
        return chosen

    def describe_materialization(self, repository: RepositoryRef) -> str:
        """One-line announcement of what ``materialize`` is about to do."""
        name = repository.name
        if self.repository_manager.has_working_copy(repository):
            return f"📂  '{name}' already exists – pulling latest changes…"

        local_path = self.repository_manager.local_path(repository)
        target = f"./{name}" if local_path == Path(name) else str(local_path)
        return f"⬇️  Cloning '{repository.full_name}' into {target} …"

    def materialize(self, repository: RepositoryRef) -> MaterializationResult:
        return self.repository_manager.materialize(repository)
