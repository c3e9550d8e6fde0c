"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # Column widths
    EMAIL_MAX_LENGTH = 255
    NAME_MAX_LENGTH = 255
    
    # Relational storage
    TABLE_NAME = "users"
