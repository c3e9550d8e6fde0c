"""
Dependency Resolution
=====================

FastAPI dependencies that pull services out of the DI container attached
to the running application.
"""
from fastapi import Request

from user_api.application.services.user_service import UserService
from user_api.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container owned by the current application.
    
    Returns:
        DIContainer built at application startup
    """
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    """
    Get user service instance (singleton per application).
    
    Returns:
        UserService instance
    """
    return get_container(request).get(UserService)
