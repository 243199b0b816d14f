"""
GitHub Client
=============

Thin async client for the two GitHub REST calls the profile service makes:
user avatar lookup and listing a user's newest repositories.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from devconnect.core.config import get_settings
from devconnect.domain.exceptions import GitHubLookupError

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    GitHub REST API client.

    Every failure (transport error, non-2xx status, malformed body) is raised
    as GitHubLookupError; callers treat them all as "not found".
    """

    USER_AGENT = "devconnect-profile-api"

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client, falling back to settings for anything not given.

        Args:
            token: GitHub access token
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self._token = settings.github_token if token is None else token
        self._base_url = (base_url or settings.github_api_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.github_timeout_seconds
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.USER_AGENT,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a path and return the decoded JSON body."""
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("GitHub returned %s for %s", e.response.status_code, url)
            raise GitHubLookupError(f"GitHub returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("GitHub request to %s failed: %s", url, e)
            raise GitHubLookupError(str(e)) from e
        except ValueError as e:
            logger.warning("GitHub sent an invalid JSON body for %s", url)
            raise GitHubLookupError("Invalid response body") from e

    async def get_avatar_url(self, username: str) -> str:
        """
        Get the avatar URL of a GitHub user.

        Raises:
            GitHubLookupError: If the user cannot be fetched
        """
        if not username or not username.strip():
            raise GitHubLookupError("GitHub username is empty")
        data = await self._get(f"/users/{quote(username.strip(), safe='')}")
        avatar_url = data.get("avatar_url") if isinstance(data, dict) else None
        if not avatar_url:
            raise GitHubLookupError(f"No avatar for GitHub user '{username}'")
        return avatar_url

    async def get_recent_repos(self, username: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        List a user's most recently created repositories, newest first.

        Args:
            username: GitHub username
            limit: Maximum number of repositories (defaults to settings)

        Raises:
            GitHubLookupError: If the repositories cannot be fetched
        """
        if not username or not username.strip():
            raise GitHubLookupError("GitHub username is empty")
        per_page = limit or get_settings().github_repos_limit
        data = await self._get(
            f"/users/{quote(username.strip(), safe='')}/repos",
            params={"per_page": per_page, "sort": "created", "direction": "desc"},
        )
        if not isinstance(data, list):
            raise GitHubLookupError("Unexpected repository listing")
        return data[:per_page]
