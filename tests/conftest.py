from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from user_api.core.config import Settings
from user_api.domain.services.user_validation_service import UserValidationService
from user_api.application.services.user_service import UserService
from user_api.main import create_application
from tests.fakes import InMemoryUserRepository


class FakeClock:
    """Deterministic replacement for datetime_utils.now()."""
    
    def __init__(self) -> None:
        self.current = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    
    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture()
def clock(monkeypatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr("user_api.domain.models.user.now", fake)
    return fake


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        environment="test",
        auto_create_schema=True,
        load_env_file=False,
    )


@pytest.fixture()
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def service(repository: InMemoryUserRepository) -> UserService:
    return UserService(repository, UserValidationService())


@pytest.fixture()
def client(settings: Settings):
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client
