from typing import TYPE_CHECKING
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.mongo_profile_repository import MongoProfileRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Each repository receives the database registered by DatabaseProvider.
        """
        container.register_factory(
            ProfileRepository,
            lambda: MongoProfileRepository(container.get("mongo_database")),
        )
        container.register_factory(
            UserRepository,
            lambda: MongoUserRepository(container.get("mongo_database")),
        )
        container.register_factory(
            PostRepository,
            lambda: MongoPostRepository(container.get("mongo_database")),
        )
