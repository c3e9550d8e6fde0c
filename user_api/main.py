"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: build DI container → create schema; shutdown: dispose engine.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from user_api import __version__
from user_api.api.v1 import user_router
from user_api.core.config import Settings, get_settings
from user_api.di.container import DIContainer
from user_api.infrastructure.db.sql_connection import create_schema

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Dependency container (settings, engine, repositories, services)
    - CORS middleware configuration
    - API route registration
    - Lifespan handler for schema creation and engine disposal
    
    Args:
        settings: Application settings (loaded from the environment if omitted)
        container: Pre-built container; built from settings if omitted
    
    Returns:
        Configured FastAPI application instance
    """
    if container is None:
        container = DIContainer(settings or get_settings())
    settings = container.get(Settings)
    
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        engine = container.get(Engine)
        if settings.auto_create_schema:
            create_schema(engine)
        logger.info(f"User API started ({settings.environment})")
        try:
            yield
        finally:
            engine.dispose()
            logger.info("User API stopped")
    
    application = FastAPI(
        title="User API",
        description="CRUD API for user management",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    application.include_router(user_router, prefix="/api/v1/users")
    
    @application.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "OK"}
    
    return application
