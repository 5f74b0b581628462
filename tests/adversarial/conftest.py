"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for enumeration and race condition tests.
"""

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.adapters.session.memory import InMemorySessionStore
from src.domain.confirmation import ConfirmationService
from src.domain.hashing import CredentialHasher
from src.domain.session import SessionManager


@pytest.fixture
def confirmation_service(
    repository: InMemoryUserRepository, hasher: CredentialHasher
) -> ConfirmationService:
    return ConfirmationService(repository=repository, hasher=hasher)


@pytest.fixture
def session_manager(
    repository: InMemoryUserRepository,
    session_store: InMemorySessionStore,
    hasher: CredentialHasher,
) -> SessionManager:
    return SessionManager(repository=repository, session_store=session_store, hasher=hasher)
