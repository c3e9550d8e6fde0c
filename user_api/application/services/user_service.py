"""
User Service
============

Application service that coordinates user-related operations.
This service orchestrates the user use cases.
"""
from typing import List
from uuid import UUID

from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.domain.services.user_validation_service import UserValidationService
from user_api.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)


class UserService:
    """
    Application service for user operations.
    
    This service coordinates multiple use cases and provides
    a high-level interface for user management.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        validation_service: UserValidationService,
    ):
        """
        Initialize service with repository and validation rules.
        
        Args:
            user_repository: Repository for user persistence
            validation_service: Domain validation rules
        """
        self._create_use_case = CreateUserUseCase(user_repository, validation_service)
        self._get_use_case = GetUserUseCase(user_repository)
        self._update_use_case = UpdateUserUseCase(user_repository, validation_service)
        self._delete_use_case = DeleteUserUseCase(user_repository)
        self._list_use_case = ListUsersUseCase(user_repository)
    
    def create_user(self, email: str, name: str) -> User:
        """
        Create a user.
        
        Args:
            email: Email address of the new user
            name: Display name
            
        Returns:
            Created user entity
        """
        return self._create_use_case.execute(email=email, name=name)
    
    def get_user(self, user_id: UUID) -> User:
        """
        Get a user by ID.
        
        Args:
            user_id: Unique user identifier
            
        Returns:
            User entity
        """
        return self._get_use_case.execute(user_id)
    
    def update_user(self, user_id: UUID, name: str) -> User:
        """
        Rename a user.
        
        Args:
            user_id: Unique user identifier
            name: New display name
            
        Returns:
            Updated user entity
        """
        return self._update_use_case.execute(user_id=user_id, name=name)
    
    def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""
        self._delete_use_case.execute(user_id)
    
    def list_users(self) -> List[User]:
        """List all users, newest first."""
        return self._list_use_case.execute()
