"""
User Controller
===============

FastAPI controller for user management endpoints.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from user_api.application.dto.user_dto import (
    UserCreateRequest,
    UserDeleteResponse,
    UserResponse,
    UserUpdateRequest,
)
from user_api.api.v1.dependencies import get_user_service
from user_api.application.services.user_service import UserService
from user_api.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    StorageError,
    UserDomainError,
    ValidationError,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


def _to_http_error(exc: UserDomainError) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(exc, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, AlreadyExistsError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    else:
        if isinstance(exc, StorageError):
            logger.exception("Storage failure while handling user request")
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=exc.message)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Create a new user. Fails with 409 if the email is already registered.",
)
def create_user(
    request: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user."""
    try:
        user = service.create_user(email=request.email, name=request.name)
    except UserDomainError as e:
        raise _to_http_error(e) from e
    
    return UserResponse.from_entity(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
def get_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a specific user by ID."""
    try:
        user = service.get_user(user_id)
    except UserDomainError as e:
        raise _to_http_error(e) from e
    
    return UserResponse.from_entity(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Rename a user. Email and identity cannot be changed.",
)
def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user's name."""
    try:
        user = service.update_user(user_id=user_id, name=request.name)
    except UserDomainError as e:
        raise _to_http_error(e) from e
    
    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    response_model=UserDeleteResponse,
    summary="Delete a user",
)
def delete_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> UserDeleteResponse:
    """Delete a user."""
    try:
        service.delete_user(user_id)
    except UserDomainError as e:
        raise _to_http_error(e) from e
    
    return UserDeleteResponse(
        status="deleted",
        user_id=user_id,
        message="User deleted successfully",
    )


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Get all users ordered by creation time, newest first.",
)
def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List all users."""
    try:
        users = service.list_users()
    except UserDomainError as e:
        raise _to_http_error(e) from e
    
    return [UserResponse.from_entity(user) for user in users]
