"""
User Validation Service
=======================

Stateless domain rules applied to users before they are persisted.
"""
from user_api.domain.constants.user_fields import UserFields
from user_api.domain.exceptions import ValidationError
from user_api.domain.models.user import User


class UserValidationService:
    """Validates and sanitizes user input."""
    
    def validate(self, user: User) -> None:
        """
        Validate a user entity.
        
        The email check is a loose heuristic (an "@" and a "." somewhere in
        the string), not an RFC 5322 parser.
        
        Args:
            user: User entity to validate
            
        Raises:
            ValidationError: If email or name is missing or too long, or email is malformed
        """
        if not user.email:
            raise ValidationError("email is required")
        
        if not user.name:
            raise ValidationError("name is required")
        
        if not self._is_valid_email(user.email):
            raise ValidationError("invalid email format")
        
        if len(user.email) > UserFields.EMAIL_MAX_LENGTH:
            raise ValidationError(f"email must be at most {UserFields.EMAIL_MAX_LENGTH} characters")
        
        if len(user.name) > UserFields.NAME_MAX_LENGTH:
            raise ValidationError(f"name must be at most {UserFields.NAME_MAX_LENGTH} characters")
    
    def sanitize_name(self, name: str) -> str:
        """Trim surrounding whitespace from a name."""
        return name.strip()
    
    @staticmethod
    def _is_valid_email(email: str) -> bool:
        return "@" in email and "." in email
