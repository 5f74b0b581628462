"""
Auth API package.

Contains the login, session, registration and confirmation routes.
"""

from src.api.auth.routes import router

__all__ = ["router"]
