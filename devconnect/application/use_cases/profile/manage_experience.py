"""
Experience Use Cases
====================

Adding and removing entries of a profile's experience list.
"""
from devconnect.application.dto.profile_dto import ExperienceCreateRequest
from devconnect.domain.exceptions import ProfileNotFoundError
from devconnect.domain.models.profile import Experience, Profile
from devconnect.domain.repositories.profile_repository import ProfileRepository


class AddExperienceUseCase:
    """Use case for prepending an experience entry (most recent first)."""

    def __init__(self, profile_repository: ProfileRepository):
        self._repository = profile_repository

    def execute(self, user_id: str, request: ExperienceCreateRequest) -> Profile:
        """
        Add an experience entry to the user's profile.

        Raises:
            ValueError: If the entry ends before it starts
            ProfileNotFoundError: If the user has no profile
        """
        experience = Experience(
            title=request.title,
            company=request.company,
            location=request.location,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        experience.validate()

        profile = self._repository.push_experience(user_id, experience)
        if profile is None:
            raise ProfileNotFoundError("There is no profile for this user")
        return profile


class RemoveExperienceUseCase:
    """Use case for removing an experience entry by id."""

    def __init__(self, profile_repository: ProfileRepository):
        self._repository = profile_repository

    def execute(self, user_id: str, experience_id: str) -> Profile:
        """
        Remove the matching experience entry. Unknown ids leave the list as is.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        profile = self._repository.pull_experience(user_id, experience_id)
        if profile is None:
            raise ProfileNotFoundError("There is no profile for this user")
        return profile
