"""
Upsert Profile Use Case
=======================

Business use case for creating the caller's profile or updating it in place.
"""
from typing import Optional

from starlette.concurrency import run_in_threadpool

from devconnect.application.dto.profile_dto import ProfileUpsertRequest
from devconnect.application.use_cases.profile.resolve_avatar import ResolveAvatarUseCase
from devconnect.domain.models.profile import SOCIAL_NETWORKS, Profile, SocialLinks
from devconnect.domain.repositories.profile_repository import ProfileRepository
from devconnect.utils.url_utils import normalize_url


class UpsertProfileUseCase:
    """
    Use case for creating or updating a profile.

    There is at most one profile per user: a second call for the same user
    overwrites the top-level fields and keeps experience and education.
    """

    def __init__(self, profile_repository: ProfileRepository, resolve_avatar: ResolveAvatarUseCase):
        """
        Initialize use case.

        Args:
            profile_repository: Repository for profile persistence
            resolve_avatar: Use case that refreshes the user's avatar
        """
        self._repository = profile_repository
        self._resolve_avatar = resolve_avatar

    async def execute(self, user_id: str, request: ProfileUpsertRequest) -> Profile:
        """
        Execute the upsert profile use case.

        The avatar is refreshed before the profile is written, so a failed
        GitHub lookup leaves the profile untouched.

        Returns:
            The saved profile

        Raises:
            ValueError: If input validation fails
            GitHubLookupError: If the GitHub avatar cannot be fetched
            UserNotFoundError: If the user does not exist
        """
        profile = Profile(
            user_id=user_id,
            status=request.status.strip(),
            skills=list(request.skills),
            company=request.company,
            website=_normalize_optional(request.website),
            location=request.location,
            bio=request.bio,
            githubusername=request.githubusername,
            usegithubavatar=request.usegithubavatar,
            social=SocialLinks(**{
                name: _normalize_optional(getattr(request, name))
                for name in SOCIAL_NETWORKS
            }),
        )

        await self._resolve_avatar.execute(
            user_id=user_id,
            use_github_avatar=profile.usegithubavatar,
            github_username=profile.githubusername,
        )

        return await run_in_threadpool(self._repository.upsert, profile)


def _normalize_optional(url: Optional[str]) -> Optional[str]:
    """Normalize a URL. Blank values collapse to "" and None stays None."""
    if url is None:
        return None
    if not url.strip():
        return ""
    return normalize_url(url, force_https=True)
