"""
Unauthenticated GitHub REST client for public repository listings.
"""

import requests
import logging
from typing import Any, List, Optional

from .. import __version__
from ..error_handling import EnumerationError

logger = logging.getLogger(__name__)

FALLBACK_FAILURE_MESSAGE = "Could not retrieve public repository list (rate-limited?)."


class GitHubClient:
    """
    Minimal GitHub API client used when the GitHub CLI is unavailable.

    Requests are sent without credentials, are never retried, and have no
    timeout unless one is configured. Rate limiting is reported like any
    other failure.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize GitHub API client.

        Args:
            base_url: GitHub API base URL
            timeout: Request timeout in seconds, None to wait indefinitely
            session: Session to reuse, mainly for tests
        """
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self._setup_session()

    def _setup_session(self) -> None:
        """Set up the requests session headers."""
        self.session.headers.update({
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"repo-picker/{__version__}"
        })

    def _get(self, endpoint: str, **kwargs) -> Any:
        """
        GET an endpoint and decode the JSON body.

        Raises:
            EnumerationError: On any network error, non-2xx status or bad JSON
        """
        url = f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        logger.debug(f"GET {url} {kwargs.get('params', '')}")

        try:
            response = self.session.get(url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            # Covers HTTP errors, connection failures and JSON decode errors
            logger.debug(f"Request to {url} failed: {e}")
            raise EnumerationError(FALLBACK_FAILURE_MESSAGE, source="api", cause=e)
        except ValueError as e:
            logger.debug(f"Response from {url} was not JSON: {e}")
            raise EnumerationError(FALLBACK_FAILURE_MESSAGE, source="api", cause=e)

    def list_user_repositories(self, account: str, per_page: int) -> List[str]:
        """
        List the public repositories of an account.

        Only the first page is fetched.

        Args:
            account: GitHub user or organization name
            per_page: Page size requested from the API

        Returns:
            ``owner/name`` identifiers in API order
        """
        path = requests.utils.quote(account, safe="")
        data = self._get(f"/users/{path}/repos", params={"per_page": per_page})

        if not isinstance(data, list):
            raise EnumerationError(FALLBACK_FAILURE_MESSAGE, account=account, source="api")

        try:
            return [item["full_name"] for item in data]
        except (TypeError, KeyError) as e:
            raise EnumerationError(FALLBACK_FAILURE_MESSAGE, account=account, source="api", cause=e)
