"""
Unit tests for CredentialHasher.

Tests verify:
- Hashes are one-way bcrypt values with per-value salts
- Verification accepts the right secret only
- Secrets longer than bcrypt's 72-byte input are fully significant
"""

from src.domain.hashing import CredentialHasher


class TestHash:
    """Tests for hash()."""

    def test_hash_is_not_plaintext(self, hasher: CredentialHasher) -> None:
        """Hash never equals or contains the secret."""
        hashed = hasher.hash("password123")
        assert hashed != "password123"
        assert "password123" not in hashed

    def test_hash_is_bcrypt(self, hasher: CredentialHasher) -> None:
        """Hash uses the bcrypt format with the configured cost."""
        hashed = hasher.hash("password123")
        assert hashed.startswith("$2b$04$")

    def test_same_secret_hashes_differently(self, hasher: CredentialHasher) -> None:
        """Each hash gets its own salt."""
        assert hasher.hash("password123") != hasher.hash("password123")

    def test_default_cost_is_ten(self) -> None:
        """Default bcrypt work factor is 10."""
        assert CredentialHasher().rounds == 10


class TestVerify:
    """Tests for verify() and verify_dummy()."""

    def test_verify_correct_secret(self, hasher: CredentialHasher) -> None:
        hashed = hasher.hash("password123")
        assert hasher.verify("password123", hashed) is True

    def test_verify_wrong_secret(self, hasher: CredentialHasher) -> None:
        hashed = hasher.hash("password123")
        assert hasher.verify("password124", hashed) is False

    def test_verify_is_case_sensitive(self, hasher: CredentialHasher) -> None:
        hashed = hasher.hash("Password123")
        assert hasher.verify("password123", hashed) is False

    def test_long_secrets_are_not_truncated(self, hasher: CredentialHasher) -> None:
        """Secrets differing only after byte 72 are still distinguished."""
        base = "x" * 100
        hashed = hasher.hash(base + "a")
        assert hasher.verify(base + "a", hashed) is True
        assert hasher.verify(base + "b", hashed) is False

    def test_unicode_secret(self, hasher: CredentialHasher) -> None:
        hashed = hasher.hash("pässwörd-密码")
        assert hasher.verify("pässwörd-密码", hashed) is True

    def test_works_for_uuid_tokens(self, hasher: CredentialHasher) -> None:
        token = "9123f99b-e69b-4816-8e27-536856162f26"
        hashed = hasher.hash(token)
        assert hasher.verify(token, hashed) is True
        assert hasher.verify(token.upper(), hashed) is False

    def test_verify_dummy_always_fails(self, hasher: CredentialHasher) -> None:
        assert hasher.verify_dummy("dummy_secret_for_timing_safety") is False
        assert hasher.verify_dummy("anything") is False
