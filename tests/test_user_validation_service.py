from uuid import uuid4

import pytest

from user_api.domain.exceptions import ValidationError
from user_api.domain.models.user import User
from user_api.domain.services.user_validation_service import UserValidationService


@pytest.fixture()
def validator() -> UserValidationService:
    return UserValidationService()


def _user(email: str, name: str) -> User:
    return User(id=uuid4(), email=email, name=name)


def test_valid_user_passes(validator: UserValidationService) -> None:
    validator.validate(_user("jane@example.com", "Jane"))


@pytest.mark.parametrize(
    "email, name, message",
    [
        ("", "Jane", "email is required"),
        ("jane@example.com", "", "name is required"),
        ("jane.example.com", "Jane", "invalid email format"),
        ("jane@example", "Jane", "invalid email format"),
    ],
)
def test_invalid_user_is_rejected(validator, email, name, message) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(_user(email, name))
    assert str(excinfo.value) == message


def test_email_check_is_only_a_loose_heuristic(validator: UserValidationService) -> None:
    # "@" and "." anywhere in the string is enough
    validator.validate(_user(".@", "Jane"))


def test_validation_error_is_a_value_error(validator: UserValidationService) -> None:
    with pytest.raises(ValueError):
        validator.validate(_user("", "Jane"))


def test_sanitize_name_trims_whitespace(validator: UserValidationService) -> None:
    assert validator.sanitize_name("  Bob  ") == "Bob"
    assert validator.sanitize_name("\tAnn Lee\n") == "Ann Lee"
    assert validator.sanitize_name("   ") == ""


def test_sanitize_name_keeps_inner_whitespace_and_case(validator: UserValidationService) -> None:
    assert validator.sanitize_name(" Mary  Ann ") == "Mary  Ann"


def test_values_at_column_width_are_accepted(validator: UserValidationService) -> None:
    email = "a" * 247 + "@ex.com"
    assert len(email) == 254
    validator.validate(_user(email, "n" * 255))


def test_name_longer_than_column_width_is_rejected(validator: UserValidationService) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(_user("jane@example.com", "x" * 256))
    assert str(excinfo.value) == "name must be at most 255 characters"


def test_email_longer_than_column_width_is_rejected(validator: UserValidationService) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(_user("a" * 250 + "@example.com", "Jane"))
    assert str(excinfo.value) == "email must be at most 255 characters"
