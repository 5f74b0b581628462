"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import BackgroundTasks, Depends, Request

from src.adapters.smtp.background import BackgroundEmailSender
from src.adapters.smtp.console import ConsoleEmailSender
from src.config.settings import Settings, get_settings
from src.domain.confirmation import ConfirmationService
from src.domain.hashing import CredentialHasher
from src.domain.ports import EmailSender, SessionStore, UserRepository
from src.domain.registration import RegistrationService
from src.domain.session import SessionManager


def get_repository(request: Request) -> UserRepository:
    """
    Get the user repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_session_store(request: Request) -> SessionStore:
    """Get the session store from app state."""
    return request.app.state.session_store


@lru_cache
def get_hasher() -> CredentialHasher:
    """Get credential hasher configured with the bcrypt cost (singleton)."""
    return CredentialHasher(rounds=get_settings().bcrypt_cost)


@lru_cache
def get_mail_transport() -> EmailSender:
    """Get console email sender (singleton)."""
    return ConsoleEmailSender(from_address=get_settings().email_sender_address)


def get_email_sender(
    background_tasks: BackgroundTasks,
    transport: EmailSender = Depends(get_mail_transport),
) -> EmailSender:
    """Email sender that delivers after the response has been sent."""
    return BackgroundEmailSender(background_tasks, transport)


def get_registration_service(
    request: Request,
    email_sender: EmailSender = Depends(get_email_sender),
    hasher: CredentialHasher = Depends(get_hasher),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, hasher and email sender for the domain service.
    """
    return RegistrationService(
        repository=get_repository(request),
        email_sender=email_sender,
        hasher=hasher,
        confirmation_base_url=settings.confirmation_base_url,
        require_confirmation=settings.require_confirmation,
    )


def get_confirmation_service(
    request: Request,
    hasher: CredentialHasher = Depends(get_hasher),
) -> ConfirmationService:
    """Create confirmation service with injected dependencies."""
    return ConfirmationService(repository=get_repository(request), hasher=hasher)


def get_session_manager(
    request: Request,
    hasher: CredentialHasher = Depends(get_hasher),
) -> SessionManager:
    """Create session manager bound to the app's session store."""
    return SessionManager(
        repository=get_repository(request),
        session_store=get_session_store(request),
        hasher=hasher,
    )


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> str | None:
    """
    Read the session capability from the request cookie.

    Returns None when the client holds no session.
    """
    return request.cookies.get(settings.session_cookie_name)
