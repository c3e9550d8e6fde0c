# Standard library imports
from typing import Any, Dict, Optional

# Local application imports
from user_api.core.config import Settings
from .base_container import BaseContainer
from .providers import DatabaseProvider, RepositoryProvider, UserProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Settings and database engine (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (UserProvider) - depend on repositories
    
    Anything passed in ``overrides`` is registered first and is left alone
    by the providers, so tests can swap in fakes.
    """
    
    def __init__(self, settings: Settings, overrides: Optional[Dict[Any, Any]] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        for key, instance in (overrides or {}).items():
            self.register_singleton(key, instance)
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UserProvider.register(self)
