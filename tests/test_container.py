import pytest
from sqlalchemy.engine import Engine

from user_api.application.services.user_service import UserService
from user_api.core.config import Settings
from user_api.di.container import DIContainer
from user_api.domain.repositories.user_repository import UserRepository
from user_api.infrastructure.db.sql_user_repository import SqlUserRepository
from tests.fakes import InMemoryUserRepository


def test_container_wires_sql_repository(settings: Settings) -> None:
    container = DIContainer(settings)
    
    assert container.get(Settings) is settings
    assert isinstance(container.get(Engine), Engine)
    assert isinstance(container.get(UserRepository), SqlUserRepository)
    assert isinstance(container.get(UserService), UserService)
    # singletons
    assert container.get(UserService) is container.get(UserService)


def test_overrides_replace_repository(settings: Settings) -> None:
    fake = InMemoryUserRepository()
    container = DIContainer(settings, overrides={UserRepository: fake})
    
    assert container.get(UserRepository) is fake
    container.get(UserService).create_user(email="a@b.com", name="Bob")
    assert len(fake.users) == 1


def test_unknown_registration_raises(settings: Settings) -> None:
    container = DIContainer(settings)
    
    with pytest.raises(KeyError):
        container.get("missing")
