"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from user_api.domain.models.user import User


class UserCreateRequest(BaseModel):
    """DTO for creating a user."""
    email: str = Field(..., description="Email address (must be unique)")
    name: str = Field(..., description="Display name")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane.doe@example.com",
                "name": "Jane Doe",
            }
        }
    )


class UserUpdateRequest(BaseModel):
    """DTO for renaming a user."""
    name: str = Field(..., description="New display name")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Smith",
            }
        }
    )


class UserResponse(BaseModel):
    """DTO for user data."""
    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserDeleteResponse(BaseModel):
    """DTO for user deletion."""
    status: str
    user_id: UUID
    message: str
