from typing import TYPE_CHECKING

from sqlalchemy.engine import Engine

from user_api.core.config import Settings
from user_api.infrastructure.db.sql_connection import create_db_engine

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database engine in the container.
        This is the ONLY place where database connections are created.
        """
        if container.has(Engine):
            return
        
        settings = container.get(Settings)
        container.register_singleton(
            Engine,
            create_db_engine(settings.database_url, echo=settings.database_echo),
        )
