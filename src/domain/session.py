"""
Session manager - login, session check and logout.

State per client session:

    Anonymous --login success--> Authenticated --logout--> Anonymous
    Anonymous --login failure--> Anonymous

The session store is passed in explicitly; nothing here reads ambient
request state. check() re-reads the user on every call, so the projection
reflects changes made after login (e.g. a confirmation from another client).
"""

import logging
from dataclasses import dataclass

from .exceptions import Unauthorized
from .hashing import CredentialHasher
from .models import PublicUser
from .ports import SessionStore, UserRepository
from .projection import project

logger = logging.getLogger(__name__)


@dataclass
class SessionManager:
    """Domain service binding authenticated users to server-side sessions."""

    repository: UserRepository
    session_store: SessionStore
    hasher: CredentialHasher

    def login(self, email: object, password: object) -> tuple[PublicUser, str]:
        """
        Authenticate with email and password and open a new session.

        Unknown email and wrong password raise the same error after the
        same amount of bcrypt work.

        Returns:
            Tuple of (public user, session token)

        Raises:
            Unauthorized: For any credential failure
        """
        if not isinstance(email, str) or not isinstance(password, str):
            raise Unauthorized()

        user = self.repository.get_user_by_email(email)
        if user is None:
            self.hasher.verify_dummy(password)
            raise Unauthorized()

        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Failed login for user %s", user.id)
            raise Unauthorized()

        token = self.session_store.create(user.id)
        logger.info("User %s logged in", user.id)
        return project(user), token

    def check(self, token: str | None) -> PublicUser:
        """
        Resolve a session token to the current state of its user.

        Raises:
            Unauthorized: If the token is missing, unknown, or its user is gone
        """
        if not token:
            raise Unauthorized()

        user_id = self.session_store.get(token)
        if user_id is None:
            raise Unauthorized()

        user = self.repository.get_user_by_id(user_id)
        if user is None:
            self.session_store.destroy(token)
            raise Unauthorized()
        return project(user)

    def logout(self, token: str | None) -> None:
        """Destroy one session. Safe to call repeatedly or without a session."""
        if token:
            self.session_store.destroy(token)
