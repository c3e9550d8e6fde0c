"""
User Model
==========

Domain model representing a user in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from user_api.utils.datetime_utils import now


@dataclass
class User:
    """
    User domain model.
    
    Represents a user with identity, contact email and display name.
    This model is independent of any persistence mechanism.
    """
    id: UUID
    email: str
    name: str
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    
    @classmethod
    def new(cls, email: str, name: str) -> "User":
        """Build a brand new user with a fresh identity."""
        created = now()
        return cls(
            id=uuid4(),
            email=email,
            name=name,
            created_at=created,
            updated_at=created,
        )
    
    def update_name(self, new_name: str) -> None:
        """Update user name."""
        self.name = new_name
        self.updated_at = now()
    
    def is_valid(self) -> bool:
        """Check that email and name are both present."""
        return bool(self.email) and bool(self.name)
