"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from .models import NewUser, User


@dataclass(frozen=True)
class EmailMessage:
    """Outbound email handed to an EmailSender."""

    to: str
    subject: str
    html: str


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def create_user(self, new_user: NewUser) -> User:
        """
        Persist a new user and return the stored row.

        The repository assigns id and created_at. Creation is atomic:
        the row is either fully visible to other callers or not at all.

        Args:
            new_user: Validated fields with secrets already hashed

        Returns:
            The created User

        Raises:
            ConflictError: If the email is already registered
                (compared case-insensitively)
        """
        ...

    def get_user_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive), or None."""
        ...

    def get_user_by_id(self, user_id: str) -> User | None:
        """Fetch a user by id, or None."""
        ...

    def update_user(
        self,
        user_id: str,
        changes: Mapping[str, object],
        expected: Mapping[str, object] | None = None,
    ) -> User | None:
        """
        Apply a partial update to a user row.

        When expected is given, the update is applied only if every listed
        column still holds the given value (compare-and-set). This is what
        makes confirmation single-use under concurrent requests.

        Args:
            user_id: Id of the row to update
            changes: Column name -> new value (User field names)
            expected: Column name -> value that must currently be stored

        Returns:
            The updated User, or None if the row does not exist or an
            expected value no longer matches
        """
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send(self, message: EmailMessage) -> None:
        """
        Deliver a message. The domain does not depend on the outcome.

        Args:
            message: Recipient, subject and HTML body
        """
        ...


class SessionStore(Protocol):
    """Port interface for server-side session bindings."""

    def create(self, user_id: str) -> str:
        """Bind a new opaque session token to user_id and return the token."""
        ...

    def get(self, token: str) -> str | None:
        """Return the user id bound to token, or None if unknown."""
        ...

    def destroy(self, token: str) -> None:
        """Remove the binding for token. Unknown tokens are ignored."""
        ...
