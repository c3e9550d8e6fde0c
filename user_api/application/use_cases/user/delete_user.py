"""
Delete User Use Case
====================

Business use case for removing a user.
"""
import logging
from uuid import UUID

from user_api.domain.exceptions import NotFoundError
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user. Deletion is permanent."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self, user_id: UUID) -> None:
        """
        Delete a user.
        
        Raises:
            NotFoundError: If no user has this ID
        """
        if self._repository.get_by_id(user_id) is None:
            raise NotFoundError(user_id)
        
        self._repository.delete(user_id)
        logger.info(f"User {user_id} deleted")
