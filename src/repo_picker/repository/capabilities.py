"""
Startup checks: required tools and the optional GitHub CLI session.
"""

import logging
import shutil
from dataclasses import dataclass
from typing import Iterable

from ..error_handling import MissingPrerequisiteError
from .gh_cli import GhCli

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Capabilities:
    """What the local environment lets us use, probed once at startup."""
    gh_available: bool = False
    gh_authenticated: bool = False

    @property
    def use_gh_cli(self) -> bool:
        """The authenticated listing is usable only when both checks passed."""
        return self.gh_available and self.gh_authenticated


def check_prerequisites(tools: Iterable[str]) -> None:
    """
    Make sure every required tool is on PATH.

    Raises:
        MissingPrerequisiteError: For the first tool that is missing
    """
    for tool in tools:
        if shutil.which(tool) is None:
            raise MissingPrerequisiteError(tool)
        logger.debug(f"Found required tool: {tool}")


class CapabilityProbe:
    """
    Decides whether the authenticated GitHub CLI can be used.

    Probing never fails: a missing or logged-out gh simply yields
    capabilities that route enumeration to the public API.
    """

    def __init__(self, gh: GhCli):
        self.gh = gh

    def probe(self) -> Capabilities:
        if not self.gh.installed:
            logger.debug(f"'{self.gh.executable}' not found on PATH")
            return Capabilities(gh_available=False, gh_authenticated=False)

        authenticated = self.gh.is_authenticated()
        logger.info(f"GitHub CLI found at {self.gh.path}, authenticated: {authenticated}")
        return Capabilities(gh_available=True, gh_authenticated=authenticated)
