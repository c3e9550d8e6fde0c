"""
SQL User Repository
===================

Concrete implementation of UserRepository using SQLAlchemy Core.
Every statement is built with bound parameters.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from user_api.domain.constants.user_fields import UserFields
from user_api.domain.exceptions import AlreadyExistsError, StorageError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.infrastructure.db.schema import users_table
from user_api.utils.datetime_utils import ensure_aware


class SqlUserRepository(UserRepository):
    """
    Relational implementation of UserRepository.
    
    Handles all user persistence operations against the users table.
    """
    
    def __init__(self, engine: Engine):
        """
        Initialize repository with a database engine.
        
        Args:
            engine: SQLAlchemy engine (shared connection pool)
        """
        self._engine = engine
        self._table = users_table
    
    def _to_entity(self, row: Row) -> User:
        """Convert a result row to User entity."""
        data = row._mapping
        return User(
            id=data[UserFields.ID],
            email=data[UserFields.EMAIL],
            name=data[UserFields.NAME],
            created_at=ensure_aware(data[UserFields.CREATED_AT]),
            updated_at=ensure_aware(data[UserFields.UPDATED_AT]),
        )
    
    def _to_row(self, user: User) -> dict:
        """Convert User entity to column values."""
        return {
            UserFields.ID: user.id,
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }
    
    def _find_one(self, column, value) -> Optional[User]:
        stmt = select(self._table).where(column == value)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load user: {exc}") from exc
        
        if row is None:
            return None
        return self._to_entity(row)
    
    def create(self, user: User) -> User:
        """Create a new user."""
        stmt = insert(self._table).values(**self._to_row(user))
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except IntegrityError as exc:
            raise AlreadyExistsError(user.email) from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to create user: {exc}") from exc
        
        return user
    
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by ID."""
        return self._find_one(self._table.c.id, user_id)
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return self._find_one(self._table.c.email, email)
    
    def update(self, user: User) -> User:
        """Update name and updated_at of an existing user."""
        stmt = (
            update(self._table)
            .where(self._table.c.id == user.id)
            .values(name=user.name, updated_at=user.updated_at)
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to update user '{user.id}': {exc}") from exc
        
        return user
    
    def delete(self, user_id: UUID) -> None:
        """Delete a user."""
        stmt = delete(self._table).where(self._table.c.id == user_id)
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to delete user '{user_id}': {exc}") from exc
    
    def list_all(self) -> List[User]:
        """List all users, newest first."""
        stmt = select(self._table).order_by(self._table.c.created_at.desc())
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to list users: {exc}") from exc
        
        return [self._to_entity(row) for row in rows]
