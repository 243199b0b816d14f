"""
Post Repository Interface
=========================

Posts are owned by the surrounding application; this service only removes
a user's posts when the account is deleted.
"""
from abc import ABC, abstractmethod


class PostRepository(ABC):
    """Abstract repository for post persistence operations."""

    @abstractmethod
    def delete_by_user_id(self, user_id: str) -> int:
        """
        Delete every post written by a user.

        Returns:
            Number of deleted posts
        """
        pass
