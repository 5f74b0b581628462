"""
Unit tests for API request/response models.

Tests Pydantic model validation for the auth endpoints.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.api.models import LoginRequest, RegisterRequest, UserResponse
from src.domain.models import PublicUser

VALID = {"firstName": "New", "lastName": "User", "email": "new@user.com", "password": "newpassword"}


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_valid_register_request(self) -> None:
        request = RegisterRequest.model_validate(VALID)
        assert request.email == "new@user.com"
        assert request.first_name == "New"
        assert request.last_name == "User"
        assert request.password == "newpassword"

    def test_email_is_not_normalized(self) -> None:
        """Case is left to the repository."""
        request = RegisterRequest.model_validate({**VALID, "email": "New@User.COM"})
        assert request.email == "New@User.COM"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("email", None),
            ("email", 0),
            ("email", {"email": "lol"}),
            ("email", "bademail@something"),
            ("email", "bademail "),
            ("password", "tooshor"),
            ("password", {"password": None}),
            ("password", 12345678),
            ("firstName", ""),
            ("firstName", {}),
            ("lastName", None),
        ],
    )
    def test_invalid_field_rejected(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest.model_validate({**VALID, field: value})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == (field,)

    def test_password_exactly_8_chars(self) -> None:
        request = RegisterRequest.model_validate({**VALID, "password": "NOTshort"})
        assert request.password == "NOTshort"

    def test_every_invalid_field_reported(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest.model_validate({})
        assert {e["loc"][0] for e in exc_info.value.errors()} == {
            "email",
            "firstName",
            "lastName",
            "password",
        }


class TestLoginRequest:
    """Tests for LoginRequest model."""

    def test_accepts_any_strings(self) -> None:
        request = LoginRequest(email="not-an-email", password="x")
        assert request.email == "not-an-email"

    def test_keeps_non_strings_for_the_domain(self) -> None:
        request = LoginRequest.model_validate({"email": 1, "password": None})
        assert request.email == 1
        assert request.password is None

    def test_missing_fields_default_to_none(self) -> None:
        request = LoginRequest.model_validate({"email": "a@b.com"})
        assert request.password is None

    @pytest.mark.parametrize("body", [[], "text", 42, None])
    def test_non_object_body_reads_as_empty(self, body: object) -> None:
        request = LoginRequest.model_validate(body)
        assert request.email is None
        assert request.password is None


class TestUserResponse:
    """Tests for UserResponse model."""

    def test_serializes_camel_case(self) -> None:
        created = datetime(2026, 1, 1, tzinfo=timezone.utc)
        response = UserResponse.from_public(
            PublicUser(
                id="abc",
                email="new@user.com",
                first_name="New",
                last_name="User",
                created_at=created,
                account_confirmation_pending=True,
            )
        )

        data = response.model_dump(by_alias=True)
        assert data == {
            "id": "abc",
            "email": "new@user.com",
            "firstName": "New",
            "lastName": "User",
            "createdAt": created,
            "accountConfirmationPending": True,
        }

    def test_has_no_secret_fields(self) -> None:
        assert "password" not in UserResponse.model_fields
        assert "password_hash" not in UserResponse.model_fields
        assert "confirmation_token_hash" not in UserResponse.model_fields
