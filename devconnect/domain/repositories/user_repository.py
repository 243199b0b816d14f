"""
User Repository Interface
=========================

Abstract interface for the parts of user data access this service needs.
"""
from abc import ABC, abstractmethod
from typing import Optional

from devconnect.domain.models.user import User


class UserRepository(ABC):
    """Abstract repository for user persistence operations."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by id.

        Returns:
            User if found, None otherwise (including malformed ids)
        """
        pass

    @abstractmethod
    def update_avatar(self, user_id: str, avatar: str) -> bool:
        """
        Replace the avatar URL of a user.

        Returns:
            True if the user exists, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if the user was found and deleted, False otherwise
        """
        pass
