"""
Auth routes.

Defines REST endpoints for authentication and account confirmation.
Handlers are plain functions: FastAPI runs them on its thread pool, so
bcrypt work never blocks the event loop.

Domain errors are not caught here; the handlers in src.api.errors turn
them into 400 / 401 / 409 responses.
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status

from src.api.dependencies import (
    get_confirmation_service,
    get_registration_service,
    get_session_manager,
    get_session_token,
)
from src.api.models import (
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    ValidationErrorResponse,
)
from src.config.settings import Settings, get_settings
from src.domain.confirmation import ConfirmationService
from src.domain.registration import RegistrationService
from src.domain.session import SessionManager

router = APIRouter(tags=["auth"])

_UNAUTHORIZED = {401: {"description": "Not authenticated (empty body)"}}
_INVALID = {400: {"model": ValidationErrorResponse, "description": "Invalid input"}}


@router.post(
    "/login",
    response_model=UserResponse,
    responses=_UNAUTHORIZED,
    summary="Log in",
    description="Authenticate with email and password and open a session (cookie).",
)
def login(
    response: Response,
    request_data: LoginRequest | None = Body(None),
    current_token: str | None = Depends(get_session_token),
    manager: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
) -> UserResponse:
    """
    Log in and set the session cookie.

    Unknown email, wrong password and malformed bodies produce the same
    401 response.
    """
    credentials = request_data or LoginRequest()
    user, token = manager.login(credentials.email, credentials.password)
    # Replacing a session this client already held
    manager.logout(current_token)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return UserResponse.from_public(user)


@router.post(
    "/check",
    response_model=UserResponse,
    responses=_UNAUTHORIZED,
    summary="Check session",
    description="Return the current state of the logged-in user.",
)
def check(
    token: str | None = Depends(get_session_token),
    manager: SessionManager = Depends(get_session_manager),
) -> UserResponse:
    """Resolve the session cookie to the user, re-read from storage."""
    return UserResponse.from_public(manager.check(token))


@router.post(
    "/logout",
    summary="Log out",
    description="Destroy the current session. Safe to call without a session.",
)
def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    manager: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Destroy the session and clear the cookie."""
    manager.logout(token)
    response.delete_cookie(key=settings.session_cookie_name)
    return {}


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    responses={
        **_INVALID,
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
    summary="Register a new user",
    description="Create an account pending confirmation. "
    "A confirmation link is emailed to the provided address.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> UserResponse:
    """
    Register a new user and send the confirmation email.

    - **firstName**, **lastName**: Non-empty names
    - **email**: Valid email address to register
    - **password**: Password (minimum 8 characters)
    """
    user = service.register(
        email=request_data.email,
        first_name=request_data.first_name,
        last_name=request_data.last_name,
        password=request_data.password,
    )
    return UserResponse.from_public(user)


@router.get(
    "/confirmAccount",
    response_model=UserResponse,
    responses={**_INVALID, **_UNAUTHORIZED},
    summary="Confirm account",
    description="Consume the confirmation token from the emailed link.",
)
def confirm_account(
    confirm: str | None = Query(default=None, description="Confirmation token (UUID)"),
    email: str | None = Query(default=None, description="Registered email address"),
    service: ConfirmationService = Depends(get_confirmation_service),
) -> UserResponse:
    """
    Confirm an account.

    Query parameters are validated by the domain so that each missing or
    malformed parameter yields exactly one entry in the error list.
    """
    return UserResponse.from_public(service.confirm(email, confirm))
