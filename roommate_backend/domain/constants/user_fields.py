"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USER_ID = "user_id"
    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"

    # Fields a caller may change after the record exists
    UPDATABLE = (FIRSTNAME, LASTNAME, EMAIL, HASHED_PASSWORD)
