"""
Domain entities - User records and their public projection.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewUser:
    """Fields required to create a user row. Secrets are already hashed."""

    email: str
    first_name: str
    last_name: str
    password_hash: str
    confirmation_token_hash: str | None = None


@dataclass(frozen=True)
class User:
    """
    Stored user entity.

    confirmation_token_hash is present exactly while the account is
    pending confirmation. Never serialize this type directly.
    """

    id: str
    email: str
    first_name: str
    last_name: str
    password_hash: str
    confirmation_token_hash: str | None
    created_at: datetime


@dataclass(frozen=True)
class PublicUser:
    """Externally safe view of a User - contains no secret-derived values."""

    id: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    account_confirmation_pending: bool
