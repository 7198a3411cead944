"""Caller identity value object."""
from dataclasses import dataclass

from ..enums import UserRole


@dataclass(frozen=True)
class Requester:
    """
    Authenticated caller, as resolved by the identity layer.

    The order core trusts this input; it never re-validates credentials.
    """

    user_id: int
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def ownership_filter(self):
        """User id to scope reads by, or None for unrestricted callers."""
        return None if self.is_admin else self.user_id
