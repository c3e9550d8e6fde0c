from typing import TYPE_CHECKING

from user_api.domain.repositories.user_repository import UserRepository
from user_api.domain.services.user_validation_service import UserValidationService
from user_api.application.services.user_service import UserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers user-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register validation rules and the user application service.
        Service is created with the repository from container.
        """
        container.register_singleton(UserValidationService, UserValidationService())
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository),
                validation_service=container.get(UserValidationService),
            )
        )
