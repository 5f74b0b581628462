"""
Account-state projector - the only way a User leaves the domain.
"""

from .models import PublicUser, User


def project(user: User) -> PublicUser:
    """Map a stored User to its public view, replacing the token hash with a flag."""
    return PublicUser(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
        account_confirmation_pending=user.confirmation_token_hash is not None,
    )
