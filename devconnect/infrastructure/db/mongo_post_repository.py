"""
MongoDB Post Repository
=======================

Concrete implementation of PostRepository using MongoDB.
"""
from typing import Optional

from pymongo.database import Database

from devconnect.core.config import get_settings
from devconnect.domain.constants.user_fields import PostFields
from devconnect.domain.repositories.post_repository import PostRepository
from devconnect.infrastructure.db.mongo_connection import get_mongo_client
from devconnect.infrastructure.db.object_id import to_object_id


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository."""

    def __init__(self, database: Optional[Database] = None):
        if database is None:
            database = get_mongo_client().get_database()
        self._collection = database[get_settings().posts_collection]

    def delete_by_user_id(self, user_id: str) -> int:
        """Delete every post written by a user."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return 0
        result = self._collection.delete_many({PostFields.USER: user_oid})
        return result.deleted_count
