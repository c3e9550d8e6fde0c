"""
Create User Use Case
====================

Business use case for registering a new user.
"""
import logging

from user_api.domain.exceptions import AlreadyExistsError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.domain.services.user_validation_service import UserValidationService

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.
    
    This encapsulates the business logic for user registration.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        validation_service: UserValidationService,
    ):
        """
        Initialize use case with repository and validation rules.
        
        Args:
            user_repository: Repository for user persistence
            validation_service: Domain validation rules
        """
        self._repository = user_repository
        self._validation = validation_service
    
    def execute(self, email: str, name: str) -> User:
        """
        Execute the create user use case.
        
        The email lookup and the insert are separate statements; a duplicate
        that slips in between is rejected by the storage unique constraint.
        
        Args:
            email: Email address of the new user
            name: Display name (surrounding whitespace is trimmed)
            
        Returns:
            Created user entity
            
        Raises:
            AlreadyExistsError: If a user with this email already exists
            ValidationError: If input validation fails
        """
        # Check if user already exists
        if self._repository.get_by_email(email) is not None:
            raise AlreadyExistsError(email)
        
        name = self._validation.sanitize_name(name)
        user = User.new(email=email, name=name)
        self._validation.validate(user)
        
        created = self._repository.create(user)
        logger.info(f"User {created.id} created")
        return created
