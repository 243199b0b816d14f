"""ObjectId helpers shared by the MongoDB repositories."""
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a hex string to an ObjectId, or None when it is malformed."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def require_object_id(value: Any) -> ObjectId:
    """Convert a hex string to an ObjectId, raising ValueError when malformed."""
    object_id = to_object_id(value)
    if object_id is None:
        raise ValueError(f"Invalid id '{value}'")
    return object_id
