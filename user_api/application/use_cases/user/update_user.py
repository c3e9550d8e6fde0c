"""
Update User Use Case
====================

Business use case for renaming an existing user.
"""
import logging
from uuid import UUID

from user_api.domain.exceptions import NotFoundError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.domain.services.user_validation_service import UserValidationService

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user.
    
    Only the name is mutable; identity, email and created_at never change.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        validation_service: UserValidationService,
    ):
        self._repository = user_repository
        self._validation = validation_service
    
    def execute(self, user_id: UUID, name: str) -> User:
        """
        Execute the update user use case.
        
        Args:
            user_id: Unique user identifier
            name: New display name (surrounding whitespace is trimmed)
            
        Returns:
            Updated user entity
            
        Raises:
            NotFoundError: If no user has this ID
            ValidationError: If the new name is empty
        """
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(user_id)
        
        user.update_name(self._validation.sanitize_name(name))
        self._validation.validate(user)
        
        updated = self._repository.update(user)
        logger.info(f"User {updated.id} updated")
        return updated
