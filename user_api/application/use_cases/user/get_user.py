"""
Get User Use Case
=================

Business use case for fetching a single user.
"""
from uuid import UUID

from user_api.domain.exceptions import NotFoundError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class GetUserUseCase:
    """Use case for fetching a user by ID."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self, user_id: UUID) -> User:
        """
        Fetch a user.
        
        Raises:
            NotFoundError: If no user has this ID
        """
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return user
