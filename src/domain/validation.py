"""
Input validation - strict typing of raw input into domain types.

Callers may pass anything (JSON bodies and query strings arrive untyped).
Every rule checks the Python type first: None, numbers, booleans, dicts and
lists are rejected rather than coerced. Rules for all fields run before an
error is raised, so a ValidationError lists every violated field.
"""

import re
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldError, ValidationError

MIN_PASSWORD_LENGTH = 8

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


@dataclass(frozen=True)
class RegistrationInput:
    """Registration fields after type and format checks."""

    email: str
    first_name: str
    last_name: str
    password: str


@dataclass(frozen=True)
class ConfirmationInput:
    """Confirmation query parameters after type and format checks."""

    email: str
    confirmation_token: str


def is_valid_email(value: object) -> bool:
    """Syntax check only; no DNS lookup, and the caller keeps the address as given."""
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_password(value: object) -> bool:
    return isinstance(value, str) and len(value) >= MIN_PASSWORD_LENGTH


def is_valid_name(value: object) -> bool:
    return isinstance(value, str) and value != ""


def is_valid_uuid(value: object) -> bool:
    return isinstance(value, str) and _UUID_PATTERN.fullmatch(value) is not None


def validate_registration(
    email: object, first_name: object, last_name: object, password: object
) -> RegistrationInput:
    """
    Validate registration fields.

    Returns:
        RegistrationInput with every field typed as str

    Raises:
        ValidationError: Listing each invalid field once
    """
    errors: list[FieldError] = []
    if not is_valid_email(email):
        errors.append(FieldError("email", "must be a valid email address"))
    if not is_valid_name(first_name):
        errors.append(FieldError("firstName", "must be a non-empty string"))
    if not is_valid_name(last_name):
        errors.append(FieldError("lastName", "must be a non-empty string"))
    if not is_valid_password(password):
        errors.append(
            FieldError(
                "password", f"must be a string of at least {MIN_PASSWORD_LENGTH} characters"
            )
        )
    if errors:
        raise ValidationError(errors)
    return RegistrationInput(
        email=email,  # type: ignore[arg-type]
        first_name=first_name,  # type: ignore[arg-type]
        last_name=last_name,  # type: ignore[arg-type]
        password=password,  # type: ignore[arg-type]
    )


def validate_confirmation(email: object, confirmation_token: object) -> ConfirmationInput:
    """
    Validate account confirmation input.

    Raises:
        ValidationError: Listing each invalid field once
    """
    errors: list[FieldError] = []
    if not is_valid_email(email):
        errors.append(FieldError("email", "must be a valid email address"))
    if not is_valid_uuid(confirmation_token):
        errors.append(FieldError("confirm", "must be a UUID"))
    if errors:
        raise ValidationError(errors)
    return ConfirmationInput(
        email=email,  # type: ignore[arg-type]
        confirmation_token=confirmation_token,  # type: ignore[arg-type]
    )
