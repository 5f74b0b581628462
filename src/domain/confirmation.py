"""
Confirmation domain service - consumes the one-time confirmation token.

Every rejection (unknown email, nothing to confirm, wrong token, lost race)
raises the same Unauthorized so the endpoint cannot be used to probe which
accounts exist or are still pending.
"""

import logging
from dataclasses import dataclass

from .exceptions import Unauthorized
from .hashing import CredentialHasher
from .models import PublicUser
from .ports import UserRepository
from .projection import project
from .validation import validate_confirmation

logger = logging.getLogger(__name__)


@dataclass
class ConfirmationService:
    """Domain service for account confirmation."""

    repository: UserRepository
    hasher: CredentialHasher

    def confirm(self, email: object, confirmation_token: object) -> PublicUser:
        """
        Confirm an account by presenting the token sent at registration.

        Args:
            email: Address the token was sent to
            confirmation_token: UUID token from the confirmation link

        Returns:
            Public projection of the confirmed user

        Raises:
            ValidationError: If email or token is missing or malformed
            Unauthorized: If there is no pending confirmation matching the token
        """
        data = validate_confirmation(email, confirmation_token)

        user = self.repository.get_user_by_email(data.email)
        stored_hash = user.confirmation_token_hash if user is not None else None

        if stored_hash is None:
            self.hasher.verify_dummy(data.confirmation_token)
            raise Unauthorized()

        if not self.hasher.verify(data.confirmation_token, stored_hash):
            logger.warning("Rejected confirmation token for user %s", user.id)
            raise Unauthorized()

        # Clear only if the hash we verified is still the stored one, so a
        # concurrent confirmation with the same token cannot succeed twice.
        confirmed = self.repository.update_user(
            user.id,
            {"confirmation_token_hash": None},
            expected={"confirmation_token_hash": stored_hash},
        )
        if confirmed is None:
            raise Unauthorized()

        logger.info("Confirmed account for user %s", confirmed.id)
        return project(confirmed)
