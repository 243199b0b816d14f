from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB database in the container.
        Registered lazily so that building the container does not open a connection.
        """
        container.register_factory("mongo_client", get_mongo_client)
        container.register_factory(
            "mongo_database",
            lambda: container.get("mongo_client").get_database(),
        )
