"""
In-memory repository adapter - Implements UserRepository protocol.

Used for local development (REPOSITORY_BACKEND=memory) and tests.
A single lock makes every operation atomic, mirroring the row-level
guarantees of the PostgreSQL adapter.
"""

import threading
import uuid
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone

from src.domain.exceptions import ConflictError
from src.domain.models import NewUser, User

_UPDATABLE_FIELDS = frozenset({"first_name", "last_name", "password_hash", "confirmation_token_hash"})


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by user id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def create_user(self, new_user: NewUser) -> User:
        with self._lock:
            if self._find_by_email(new_user.email) is not None:
                raise ConflictError(new_user.email)

            user = User(
                id=str(uuid.uuid4()),
                email=new_user.email,
                first_name=new_user.first_name,
                last_name=new_user.last_name,
                password_hash=new_user.password_hash,
                confirmation_token_hash=new_user.confirmation_token_hash,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.id] = user
            return user

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._find_by_email(email)

    def get_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def update_user(
        self,
        user_id: str,
        changes: Mapping[str, object],
        expected: Mapping[str, object] | None = None,
    ) -> User | None:
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            for name, value in (expected or {}).items():
                if getattr(user, name) != value:
                    return None

            updated = replace(user, **changes)
            self._users[user_id] = updated
            return updated

    def _find_by_email(self, email: str) -> User | None:
        key = email.casefold()
        for user in self._users.values():
            if user.email.casefold() == key:
                return user
        return None
