"""Constants for User and Post document field names"""


class UserFields:
    """Field name constants for User documents"""
    NAME = "name"
    EMAIL = "email"
    AVATAR = "avatar"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"


class PostFields:
    """Field name constants for Post documents (only what this service touches)"""
    USER = "user"
