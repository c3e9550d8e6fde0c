from typing import TYPE_CHECKING

from sqlalchemy.engine import Engine

from user_api.domain.repositories.user_repository import UserRepository
from user_api.infrastructure.db.sql_user_repository import SqlUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the engine from the database provider and creates repository instances.
        """
        if container.has(UserRepository):
            return
        
        container.register_singleton(
            UserRepository,
            SqlUserRepository(container.get(Engine)),
        )
