"""
Profile Repository Interface
============================

Abstract interface for profile data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from devconnect.domain.models.profile import Education, Experience, Profile


class ProfileRepository(ABC):
    """
    Abstract repository for profile persistence operations.

    Profiles are keyed by their owner's user id. Every method that returns a
    profile attaches the owner's name and avatar (profile.user).
    """

    @abstractmethod
    def upsert(self, profile: Profile) -> Profile:
        """
        Write the top-level fields of a profile, creating it when the user
        has none. Existing experience and education entries are kept.

        Args:
            profile: Profile carrying the fields to write

        Returns:
            The profile after the write
        """
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Optional[Profile]:
        """
        Find the profile of a user.

        Args:
            user_id: Owner user identifier

        Returns:
            Profile if found, None otherwise (including malformed ids)
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Profile]:
        """Return every profile."""
        pass

    @abstractmethod
    def delete_by_user_id(self, user_id: str) -> bool:
        """
        Delete the profile of a user.

        Returns:
            True if a profile was deleted, False otherwise
        """
        pass

    @abstractmethod
    def push_experience(self, user_id: str, experience: Experience) -> Optional[Profile]:
        """
        Insert an experience entry at the front of the list.

        Returns:
            The updated profile, or None when the user has no profile
        """
        pass

    @abstractmethod
    def pull_experience(self, user_id: str, experience_id: str) -> Optional[Profile]:
        """
        Remove the experience entry with the given id.

        Returns:
            The updated profile, or None when the user has no profile
        """
        pass

    @abstractmethod
    def push_education(self, user_id: str, education: Education) -> Optional[Profile]:
        """Insert an education entry at the front of the list."""
        pass

    @abstractmethod
    def pull_education(self, user_id: str, education_id: str) -> Optional[Profile]:
        """Remove the education entry with the given id."""
        pass
