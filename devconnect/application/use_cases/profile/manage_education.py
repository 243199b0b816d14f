"""
Education Use Cases
===================

Adding and removing entries of a profile's education list.
"""
from devconnect.application.dto.profile_dto import EducationCreateRequest
from devconnect.domain.exceptions import ProfileNotFoundError
from devconnect.domain.models.profile import Education, Profile
from devconnect.domain.repositories.profile_repository import ProfileRepository


class AddEducationUseCase:
    """Use case for prepending an education entry (most recent first)."""

    def __init__(self, profile_repository: ProfileRepository):
        self._repository = profile_repository

    def execute(self, user_id: str, request: EducationCreateRequest) -> Profile:
        """
        Add an education entry to the user's profile.

        Raises:
            ValueError: If the entry ends before it starts
            ProfileNotFoundError: If the user has no profile
        """
        education = Education(
            school=request.school,
            degree=request.degree,
            fieldofstudy=request.fieldofstudy,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        education.validate()

        profile = self._repository.push_education(user_id, education)
        if profile is None:
            raise ProfileNotFoundError("There is no profile for this user")
        return profile


class RemoveEducationUseCase:
    """Use case for removing an education entry by id."""

    def __init__(self, profile_repository: ProfileRepository):
        self._repository = profile_repository

    def execute(self, user_id: str, education_id: str) -> Profile:
        """
        Remove the matching education entry. Unknown ids leave the list as is.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        profile = self._repository.pull_education(user_id, education_id)
        if profile is None:
            raise ProfileNotFoundError("There is no profile for this user")
        return profile
