"""
Delete Account Use Case
=======================

Removes everything a user owns: posts first, then the profile, then the
user document itself.
"""
import logging

from devconnect.domain.repositories.post_repository import PostRepository
from devconnect.domain.repositories.profile_repository import ProfileRepository
from devconnect.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """Use case for deleting a user together with their profile and posts."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
    ):
        self._profiles = profile_repository
        self._users = user_repository
        self._posts = post_repository

    def execute(self, user_id: str) -> None:
        """
        Delete the account. Missing pieces are skipped, so the call is idempotent.

        Args:
            user_id: User to delete
        """
        posts_deleted = self._posts.delete_by_user_id(user_id)
        profile_deleted = self._profiles.delete_by_user_id(user_id)
        user_deleted = self._users.delete(user_id)
        logger.info(
            "Deleted account %s (posts=%d, profile=%s, user=%s)",
            user_id, posts_deleted, profile_deleted, user_deleted,
        )
