from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .list_users import ListUsersUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
