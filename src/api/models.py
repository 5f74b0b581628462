"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Registration fields are strict: JSON numbers, objects, arrays and null are rejected
for string fields instead of being coerced.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr, model_validator
from pydantic.alias_generators import to_camel

from src.domain.models import PublicUser
from src.domain.validation import MIN_PASSWORD_LENGTH, is_valid_email


def _check_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("must be a valid email address")
    return value


EmailField = Annotated[StrictStr, AfterValidator(_check_email)]


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailField
    first_name: StrictStr = Field(..., alias="firstName", min_length=1)
    last_name: StrictStr = Field(..., alias="lastName", min_length=1)
    password: StrictStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description=f"User password (min {MIN_PASSWORD_LENGTH} characters)",
    )


class LoginRequest(BaseModel):
    """
    Request model for login.

    Nothing is rejected here: missing fields stay None and non-object bodies
    read as empty, so every bad input ends as the same 401 in the domain.
    """

    email: Any = Field(None, json_schema_extra={"type": "string"})
    password: Any = Field(None, json_schema_extra={"type": "string"})

    @model_validator(mode="before")
    @classmethod
    def _ignore_non_object(cls, data: Any) -> Any:
        return data if isinstance(data, dict) else {}


class UserResponse(BaseModel):
    """Public user representation returned by every auth endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    account_confirmation_pending: bool

    @classmethod
    def from_public(cls, user: PublicUser) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            account_confirmation_pending=user.account_confirmation_pending,
        )


class FieldErrorModel(BaseModel):
    """One violated input rule."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """400 response body listing every invalid field."""

    errors: list[FieldErrorModel]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
