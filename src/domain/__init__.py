"""
Domain layer - Pure business logic with zero framework imports.

This package contains the authentication core: credential hashing,
registration with email confirmation, and server-side sessions. It
defines its own port interfaces for infrastructure abstraction.
"""

from .confirmation import ConfirmationService
from .exceptions import AuthError, ConflictError, FieldError, Unauthorized, ValidationError
from .hashing import CredentialHasher
from .models import NewUser, PublicUser, User
from .ports import EmailMessage, EmailSender, SessionStore, UserRepository
from .projection import project
from .registration import RegistrationService
from .session import SessionManager

__all__ = [
    "AuthError",
    "ConfirmationService",
    "ConflictError",
    "CredentialHasher",
    "EmailMessage",
    "EmailSender",
    "FieldError",
    "NewUser",
    "PublicUser",
    "RegistrationService",
    "SessionManager",
    "SessionStore",
    "Unauthorized",
    "User",
    "UserRepository",
    "ValidationError",
    "project",
]
