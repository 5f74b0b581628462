"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fast credential hasher (bcrypt cost 4)
- In-memory repository and session store
- A mocked mail transport
- A test application and client wired to the above
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryUserRepository
from src.adapters.session.memory import InMemorySessionStore
from src.adapters.smtp.console import ConsoleEmailSender
from src.api.auth import router
from src.api.dependencies import get_hasher, get_mail_transport
from src.api.errors import register_exception_handlers
from src.config.settings import Settings, get_settings
from src.domain.hashing import CredentialHasher
from src.domain.models import User
from src.domain.registration import RegistrationService

EXISTING_PASSWORD = "password"


@pytest.fixture(scope="session")
def hasher() -> CredentialHasher:
    """Hasher with the minimum bcrypt cost to keep tests fast."""
    return CredentialHasher(rounds=4)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def mail_transport() -> Mock:
    """Mail transport double; inspect .send.call_args_list for sent messages."""
    return Mock(spec=ConsoleEmailSender)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        repository_backend="memory",
        confirmation_base_url="http://testserver",
        session_cookie_name="session_id",
        session_cookie_secure=False,
        require_confirmation=True,
    )


@pytest.fixture
def registration_service(
    repository: InMemoryUserRepository, mail_transport: Mock, hasher: CredentialHasher
) -> RegistrationService:
    """Registration service sending synchronously to the mocked transport."""
    return RegistrationService(
        repository=repository,
        email_sender=mail_transport,
        hasher=hasher,
        confirmation_base_url="http://testserver",
    )


@pytest.fixture
def existing_user(registration_service: RegistrationService) -> User:
    """A confirmed user, created without a confirmation token."""
    return registration_service.create_user(
        email="existing@example.com",
        first_name="Existing",
        last_name="User",
        password=EXISTING_PASSWORD,
    )


@pytest.fixture
def app(
    repository: InMemoryUserRepository,
    session_store: InMemorySessionStore,
    hasher: CredentialHasher,
    mail_transport: Mock,
    settings: Settings,
) -> FastAPI:
    """Create test FastAPI application with the auth router and in-memory state."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/auth")

    test_app.state.repository = repository
    test_app.state.session_store = session_store

    test_app.dependency_overrides[get_hasher] = lambda: hasher
    test_app.dependency_overrides[get_mail_transport] = lambda: mail_transport
    test_app.dependency_overrides[get_settings] = lambda: settings
    return test_app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client; keeps cookies between requests like a browser."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(app: FastAPI) -> Generator:
    """Factory for additional independent clients (separate cookie jars)."""
    clients: list[TestClient] = []

    def factory() -> TestClient:
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client

    yield factory
    for test_client in clients:
        test_client.close()
