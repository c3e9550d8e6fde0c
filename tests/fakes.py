"""In-memory stand-ins for infrastructure used by the tests."""
from dataclasses import replace
from typing import Dict, List, Optional
from uuid import UUID

from user_api.domain.exceptions import AlreadyExistsError, StorageError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository. Stores copies so callers can't mutate state."""
    
    def __init__(self) -> None:
        self.users: Dict[UUID, User] = {}
        self.create_calls = 0
        self.update_calls = 0
    
    def create(self, user: User) -> User:
        self.create_calls += 1
        if any(u.email == user.email for u in self.users.values()):
            raise AlreadyExistsError(user.email)
        self.users[user.id] = replace(user)
        return user
    
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        user = self.users.get(user_id)
        return replace(user) if user else None
    
    def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return replace(user)
        return None
    
    def update(self, user: User) -> User:
        self.update_calls += 1
        stored = self.users[user.id]
        self.users[user.id] = replace(stored, name=user.name, updated_at=user.updated_at)
        return user
    
    def delete(self, user_id: UUID) -> None:
        self.users.pop(user_id, None)
    
    def list_all(self) -> List[User]:
        ordered = sorted(self.users.values(), key=lambda u: u.created_at, reverse=True)
        return [replace(u) for u in ordered]


class BrokenUserRepository(UserRepository):
    """Repository whose backend is unreachable."""
    
    def _fail(self, *args, **kwargs):
        raise StorageError("connection refused")
    
    create = _fail
    get_by_id = _fail
    get_by_email = _fail
    update = _fail
    delete = _fail
    list_all = _fail
