"""
Credential hasher - bcrypt hashing for passwords and confirmation tokens.

Secrets are first digested with SHA-256 and base64-encoded, then hashed with
bcrypt. The pre-digest keeps every input at 44 bytes, below bcrypt's 72-byte
limit, so long secrets are neither truncated nor rejected. bcrypt embeds a
fresh random salt in every hash, and bcrypt.checkpw() compares the final
digest in constant time.
"""

import base64
import hashlib
from dataclasses import dataclass, field

import bcrypt


def _prepare(secret: str) -> bytes:
    digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return base64.b64encode(digest)


@dataclass
class CredentialHasher:
    """
    One-way salted hashing with constant-time verification.

    Used for both passwords and confirmation tokens.
    """

    rounds: int = 10
    _dummy_hash: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Compared against when no stored hash exists, so the missing-account
        # path costs the same bcrypt work as a real mismatch.
        self._dummy_hash = bcrypt.hashpw(
            _prepare("dummy_secret_for_timing_safety"), bcrypt.gensalt(self.rounds)
        )

    def hash(self, secret: str) -> str:
        """Hash a secret with a new salt. Returns the bcrypt hash as text."""
        return bcrypt.hashpw(_prepare(secret), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, secret: str, hashed: str) -> bool:
        """Check a secret against a hash produced by hash()."""
        return bcrypt.checkpw(_prepare(secret), hashed.encode())

    def verify_dummy(self, secret: str) -> bool:
        """Spend one verification's worth of work and report a mismatch."""
        bcrypt.checkpw(_prepare(secret), self._dummy_hash)
        return False
