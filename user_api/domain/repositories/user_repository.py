"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from user_api.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.
    
    This interface defines the contract for user data access.
    Concrete implementations should be in the infrastructure layer.
    Lookups return None for missing users; any other backend failure is
    raised as StorageError.
    """
    
    @abstractmethod
    def create(self, user: User) -> User:
        """
        Create a new user.
        
        Args:
            user: User entity to create
            
        Returns:
            Created user entity
            
        Raises:
            AlreadyExistsError: If the backend rejects a duplicate email
        """
        pass
    
    @abstractmethod
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by ID.
        
        Args:
            user_id: Unique user identifier
            
        Returns:
            User entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email.
        
        Args:
            email: Email address to look up
            
        Returns:
            User entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    def update(self, user: User) -> User:
        """
        Persist the name and updated_at of an existing user.
        
        Args:
            user: User entity with updated data
            
        Returns:
            Updated user entity
        """
        pass
    
    @abstractmethod
    def delete(self, user_id: UUID) -> None:
        """
        Delete a user.
        
        Args:
            user_id: Unique user identifier
        """
        pass
    
    @abstractmethod
    def list_all(self) -> List[User]:
        """
        List every user, newest first.
        
        Returns:
            List of user entities ordered by created_at descending
        """
        pass
