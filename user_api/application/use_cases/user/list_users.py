"""
List Users Use Case
===================
"""
from typing import List

from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class ListUsersUseCase:
    """Use case for listing every user, newest first."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self) -> List[User]:
        return self._repository.list_all()
