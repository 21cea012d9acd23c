"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user, ensure_default_roles

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "ensure_default_roles",
]
