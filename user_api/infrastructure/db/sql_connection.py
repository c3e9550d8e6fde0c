"""
SQL Connection
==============

Engine construction and schema bootstrap.
The engine owns a connection pool that is safe to share across requests.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from user_api.infrastructure.db.schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.
    
    In-memory SQLite databases live inside a single connection, so they are
    pinned to a StaticPool and shared across threads.
    
    Args:
        database_url: SQLAlchemy database URL
        echo: Log every SQL statement
        
    Returns:
        Engine instance
    """
    url = make_url(database_url)
    
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=echo, pool_pre_ping=True)
    
    logger.info(f"Database engine created for {url.render_as_string(hide_password=True)}")
    return engine


def create_schema(engine: Engine) -> None:
    """Create missing tables (idempotent)."""
    metadata.create_all(engine)
    logger.info("Database schema is up to date")
