"""
Registration domain service - account creation with email confirmation.

Account lifecycle
=================

    register()  -> PENDING CONFIRMATION (confirmation_token_hash stored)
    confirm()   -> CONFIRMED            (confirmation_token_hash cleared)

create_user() with no confirmation token creates a CONFIRMED account
directly; it is used for seeding and tests and never sends email.

The plaintext confirmation token exists only in memory during register()
and in the email sent afterwards. Only its bcrypt hash is persisted.
"""

import html
import logging
import uuid
from dataclasses import dataclass
from urllib.parse import urlencode

from .hashing import CredentialHasher
from .models import NewUser, PublicUser, User
from .ports import EmailMessage, EmailSender, UserRepository
from .projection import project
from .validation import validate_registration

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Confirm your account"


def build_confirmation_email(email: str, token: str, base_url: str) -> EmailMessage:
    """Compose the confirmation message carrying the one-time token in a link."""
    query = urlencode({"confirm": token, "email": email})
    link = f"{base_url.rstrip('/')}/auth/confirmAccount?{query}"
    body = (
        "<p>Welcome! Please confirm your account by following the link below.</p>"
        f'<p><a href="{html.escape(link)}">{html.escape(link)}</a></p>'
    )
    return EmailMessage(to=email, subject=CONFIRMATION_SUBJECT, html=body)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, secret hashing,
    token generation, persistence and the confirmation email.
    """

    repository: UserRepository
    email_sender: EmailSender
    hasher: CredentialHasher
    confirmation_base_url: str
    require_confirmation: bool = True

    def register(
        self, email: object, first_name: object, last_name: object, password: object
    ) -> PublicUser:
        """
        Register a new user and send the confirmation email.

        Args:
            email: User's email address
            first_name: User's first name
            last_name: User's last name
            password: User's password (will be hashed)

        Returns:
            Public projection of the created user

        Raises:
            ValidationError: If any field is missing or malformed
            ConflictError: If the email is already registered
        """
        token = str(uuid.uuid4()) if self.require_confirmation else None
        user = self.create_user(email, first_name, last_name, password, confirmation_token=token)
        logger.info("Registered user %s (confirmation pending: %s)", user.id, token is not None)

        if token is not None:
            self._send_confirmation(user.email, token)
        return project(user)

    def create_user(
        self,
        email: object,
        first_name: object,
        last_name: object,
        password: object,
        confirmation_token: str | None = None,
    ) -> User:
        """
        Validate, hash and persist a user without sending any email.

        Args:
            confirmation_token: Plaintext token to require before the account
                counts as confirmed. None creates a confirmed account.

        Returns:
            The stored User

        Raises:
            ValidationError: If any field is missing or malformed
            ConflictError: If the email is already registered
        """
        data = validate_registration(email, first_name, last_name, password)

        token_hash = None
        if confirmation_token is not None:
            token_hash = self.hasher.hash(confirmation_token)

        return self.repository.create_user(
            NewUser(
                email=data.email,
                first_name=data.first_name,
                last_name=data.last_name,
                password_hash=self.hasher.hash(data.password),
                confirmation_token_hash=token_hash,
            )
        )

    def _send_confirmation(self, email: str, token: str) -> None:
        """
        Best-effort delivery. The user row is already persisted, so a
        delivery failure is logged and does not fail registration.
        """
        message = build_confirmation_email(email, token, self.confirmation_base_url)
        try:
            self.email_sender.send(message)
        except Exception:
            logger.exception("Failed to send confirmation email to %s", email)
