"""
Relational Schema
=================

SQLAlchemy Core table definitions.
"""
from sqlalchemy import Column, DateTime, Index, MetaData, String, Table, Uuid

from user_api.domain.constants.user_fields import UserFields

metadata = MetaData()

users_table = Table(
    UserFields.TABLE_NAME,
    metadata,
    Column(UserFields.ID, Uuid(as_uuid=True), primary_key=True),
    # Unique constraint backs up the check-then-insert in user creation
    Column(UserFields.EMAIL, String(UserFields.EMAIL_MAX_LENGTH), nullable=False, unique=True),
    Column(UserFields.NAME, String(UserFields.NAME_MAX_LENGTH), nullable=False),
    Column(UserFields.CREATED_AT, DateTime(timezone=True), nullable=False),
    Column(UserFields.UPDATED_AT, DateTime(timezone=True), nullable=False),
    Index("ix_users_created_at", UserFields.CREATED_AT),
)
