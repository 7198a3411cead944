"""User roles as issued by the identity provider."""
from enum import Enum


class UserRole(str, Enum):
    """Role claim values."""

    ADMIN = "admin"
    USER = "user"
