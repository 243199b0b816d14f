"""
Profile Service
===============

Application service that coordinates profile-related operations.
This service orchestrates multiple use cases.
"""
from typing import Any, Dict, List

from devconnect.application.dto.profile_dto import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileUpsertRequest,
)
from devconnect.application.use_cases.profile.delete_account import DeleteAccountUseCase
from devconnect.application.use_cases.profile.manage_education import (
    AddEducationUseCase,
    RemoveEducationUseCase,
)
from devconnect.application.use_cases.profile.manage_experience import (
    AddExperienceUseCase,
    RemoveExperienceUseCase,
)
from devconnect.application.use_cases.profile.resolve_avatar import ResolveAvatarUseCase
from devconnect.application.use_cases.profile.upsert_profile import UpsertProfileUseCase
from devconnect.domain.exceptions import ProfileNotFoundError
from devconnect.domain.models.profile import Profile
from devconnect.domain.repositories.post_repository import PostRepository
from devconnect.domain.repositories.profile_repository import ProfileRepository
from devconnect.domain.repositories.user_repository import UserRepository
from devconnect.infrastructure.github.github_client import GitHubClient


class ProfileService:
    """
    Application service for profile operations.

    This service coordinates multiple use cases and provides
    a high-level interface for profile management.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        github_client: GitHubClient,
    ):
        """
        Initialize service with repositories and the GitHub client.

        Args:
            profile_repository: Repository for profile persistence
            user_repository: Repository for user persistence
            post_repository: Repository for post persistence
            github_client: Client for the GitHub REST API
        """
        self._repository = profile_repository
        self._github = github_client
        self._upsert_use_case = UpsertProfileUseCase(
            profile_repository,
            ResolveAvatarUseCase(user_repository, github_client),
        )
        self._delete_use_case = DeleteAccountUseCase(
            profile_repository, user_repository, post_repository
        )
        self._add_experience_use_case = AddExperienceUseCase(profile_repository)
        self._remove_experience_use_case = RemoveExperienceUseCase(profile_repository)
        self._add_education_use_case = AddEducationUseCase(profile_repository)
        self._remove_education_use_case = RemoveEducationUseCase(profile_repository)

    def get_own_profile(self, user_id: str) -> Profile:
        """
        Get the caller's profile.

        Raises:
            ProfileNotFoundError: If the caller has no profile
        """
        profile = self._repository.find_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError("There is no profile for this user")
        return profile

    async def upsert_profile(self, user_id: str, request: ProfileUpsertRequest) -> Profile:
        """Create or update the caller's profile and refresh their avatar."""
        return await self._upsert_use_case.execute(user_id, request)

    def list_profiles(self) -> List[Profile]:
        """List every profile."""
        return self._repository.find_all()

    def get_profile_by_user_id(self, user_id: str) -> Profile:
        """
        Get a profile by its owner's id.

        Raises:
            ProfileNotFoundError: If the id is malformed or has no profile
        """
        profile = self._repository.find_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError("Profile not found")
        return profile

    def delete_account(self, user_id: str) -> None:
        """Delete the caller's posts, profile and user account."""
        self._delete_use_case.execute(user_id)

    def add_experience(self, user_id: str, request: ExperienceCreateRequest) -> Profile:
        """Prepend an experience entry to the caller's profile."""
        return self._add_experience_use_case.execute(user_id, request)

    def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        """Remove an experience entry from the caller's profile."""
        return self._remove_experience_use_case.execute(user_id, experience_id)

    def add_education(self, user_id: str, request: EducationCreateRequest) -> Profile:
        """Prepend an education entry to the caller's profile."""
        return self._add_education_use_case.execute(user_id, request)

    def remove_education(self, user_id: str, education_id: str) -> Profile:
        """Remove an education entry from the caller's profile."""
        return self._remove_education_use_case.execute(user_id, education_id)

    async def get_github_repos(self, username: str) -> List[Dict[str, Any]]:
        """
        List a GitHub user's most recently created repositories.

        Raises:
            GitHubLookupError: If GitHub cannot be queried for the user
        """
        return await self._github.get_recent_repos(username)
