"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USER_NAME = "user_name"
    EMAIL = "email"
    PASSWORD_HASH = "password_hash"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"

    # JWT claim carrying the user name
    UNIQUE_NAME_CLAIM = "unique_name"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
