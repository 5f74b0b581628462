"""
Domain exceptions - Semantic error types for authentication.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated input rule, keyed by the field's wire name."""

    field: str
    message: str


class AuthError(Exception):
    """Base class for authentication domain errors."""

    pass


class ValidationError(AuthError):
    """Input is missing or malformed. Carries every violated field."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(", ".join(error.field for error in errors))
        self.errors = errors


class Unauthorized(AuthError):
    """
    Credential, token or session rejected.

    Deliberately carries no detail: unknown account, wrong password,
    wrong token and missing session all collapse into this one error.
    """

    pass


class ConflictError(AuthError):
    """Email is already registered."""

    pass
