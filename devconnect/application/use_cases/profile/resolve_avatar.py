"""
Resolve Avatar Use Case
=======================

Picks the avatar a user's profile should show: their GitHub avatar when they
asked for it, otherwise their Gravatar.
"""
from typing import Optional

from starlette.concurrency import run_in_threadpool

from devconnect.core.config import get_settings
from devconnect.domain.exceptions import UserNotFoundError
from devconnect.domain.repositories.user_repository import UserRepository
from devconnect.infrastructure.github.github_client import GitHubClient
from devconnect.utils.gravatar import gravatar_url
from devconnect.utils.url_utils import normalize_url


class ResolveAvatarUseCase:
    """Use case for computing and storing a user's avatar URL."""

    def __init__(self, user_repository: UserRepository, github_client: GitHubClient):
        self._users = user_repository
        self._github = github_client

    async def execute(
        self,
        user_id: str,
        use_github_avatar: bool,
        github_username: Optional[str] = None,
    ) -> str:
        """
        Resolve the avatar URL and save it on the user.

        Args:
            user_id: User whose avatar is updated
            use_github_avatar: Take the avatar from GitHub instead of Gravatar
            github_username: GitHub login, required with use_github_avatar

        Returns:
            The stored (https-normalized) avatar URL

        Raises:
            ValueError: If use_github_avatar is set without a GitHub username
            GitHubLookupError: If the GitHub avatar cannot be fetched
            UserNotFoundError: If the user does not exist
        """
        if use_github_avatar:
            if not github_username or not github_username.strip():
                raise ValueError("GitHub username is required to use the GitHub avatar")
            avatar = await self._github.get_avatar_url(github_username)
        else:
            user = await run_in_threadpool(self._users.find_by_id, user_id)
            if user is None:
                raise UserNotFoundError(f"User '{user_id}' not found")
            settings = get_settings()
            avatar = gravatar_url(
                user.email,
                size=settings.gravatar_size,
                rating=settings.gravatar_rating,
                default=settings.gravatar_default,
            )

        avatar = normalize_url(avatar, force_https=True)
        if not await run_in_threadpool(self._users.update_avatar, user_id, avatar):
            raise UserNotFoundError(f"User '{user_id}' not found")
        return avatar
