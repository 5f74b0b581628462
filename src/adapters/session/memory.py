"""
In-memory session store - Implements SessionStore protocol.

Sessions live for the lifetime of the process. Tokens are 256-bit random
values from the secrets module, so one client cannot guess or reach another
client's session. Each login gets its own token: destroying one session
leaves other sessions of the same user untouched.
"""

import secrets
import threading


class InMemorySessionStore:
    """
    Implements SessionStore protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = user_id
        return token

    def get(self, token: str) -> str | None:
        with self._lock:
            return self._sessions.get(token)

    def destroy(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
