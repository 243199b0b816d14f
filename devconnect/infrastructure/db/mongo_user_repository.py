"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from typing import Optional

from pymongo.database import Database

from devconnect.core.config import get_settings
from devconnect.domain.constants.user_fields import UserFields
from devconnect.domain.models.user import User
from devconnect.domain.repositories.user_repository import UserRepository
from devconnect.infrastructure.db.mongo_connection import get_mongo_client
from devconnect.infrastructure.db.object_id import to_object_id


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    def __init__(self, database: Optional[Database] = None):
        if database is None:
            database = get_mongo_client().get_database()
        self._collection = database[get_settings().users_collection]

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=str(doc[UserFields.MONGO_ID]),
            name=doc.get(UserFields.NAME),
            email=doc.get(UserFields.EMAIL),
            avatar=doc.get(UserFields.AVATAR),
            date=doc.get(UserFields.DATE),
        )

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return None
        doc = self._collection.find_one({UserFields.MONGO_ID: user_oid})
        return self._to_entity(doc) if doc else None

    def update_avatar(self, user_id: str, avatar: str) -> bool:
        """Replace the avatar URL of a user."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return False
        result = self._collection.update_one(
            {UserFields.MONGO_ID: user_oid},
            {"$set": {UserFields.AVATAR: avatar}},
        )
        return result.matched_count > 0

    def delete(self, user_id: str) -> bool:
        """Delete a user."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return False
        result = self._collection.delete_one({UserFields.MONGO_ID: user_oid})
        return result.deleted_count > 0
