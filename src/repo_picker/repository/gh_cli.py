"""
Thin wrapper around the GitHub CLI (``gh``).
"""

import json
import logging
import shutil
import subprocess
from typing import List, Optional

from ..error_handling import EnumerationError

logger = logging.getLogger(__name__)


class GhCli:
    """
    Runs ``gh`` subcommands with captured output.

    The executable is resolved against PATH once, at construction.
    """

    def __init__(self, executable: str = "gh", host: str = "github.com"):
        self.executable = executable
        self.host = host
        self.path: Optional[str] = shutil.which(executable)

    @property
    def installed(self) -> bool:
        return self.path is not None

    def run(self, args: List[str]) -> subprocess.CompletedProcess:
        """
        Run ``gh <args>`` and return the completed process.

        Raises:
            FileNotFoundError: If gh is not installed
        """
        if not self.installed:
            raise FileNotFoundError(self.executable)

        cmd = [self.path] + list(args)
        logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(cmd, capture_output=True, text=True, check=False)

    def is_authenticated(self) -> bool:
        """True if ``gh auth status`` reports a session for the configured host."""
        try:
            result = self.run(["auth", "status", "-h", self.host])
        except OSError as e:
            logger.debug(f"gh auth status could not run: {e}")
            return False

        if result.returncode != 0:
            logger.debug(f"gh is not authenticated for {self.host}")
            return False
        return True

    def list_repositories(self, account: str, limit: int) -> List[str]:
        """
        List ``owner/name`` identifiers visible to the authenticated user.

        Covers repositories the account owns, collaborates on, or reaches
        through organization membership.

        Args:
            account: Account to list
            limit: Maximum number of repositories returned

        Returns:
            Identifiers in the order gh reports them

        Raises:
            EnumerationError: If gh fails or prints something other than JSON
        """
        try:
            result = self.run([
                "repo", "list", account,
                "--limit", str(limit),
                "--json", "nameWithOwner"
            ])
        except OSError as e:
            raise EnumerationError(
                f"Could not run the GitHub CLI: {e}",
                account=account, source="gh", cause=e
            )

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise EnumerationError(
                f"GitHub CLI could not list repositories for '{account}': {stderr}",
                account=account, source="gh"
            )

        try:
            entries = json.loads(result.stdout or "[]")
            return [entry["nameWithOwner"] for entry in entries]
        except (ValueError, TypeError, KeyError) as e:
            raise EnumerationError(
                f"Unexpected output from the GitHub CLI: {e}",
                account=account, source="gh", cause=e
            )
