"""
Bearer token helpers.

Tokens carry the identity claims the order core consumes:
``sub`` (user id, as a string), ``role`` and ``email``.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from orderdesk.domain.enums import UserRole
from orderdesk.domain.value_objects import Requester
from orderdesk.settings import AuthSettings, get_app_settings

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be turned into a Requester."""


def create_access_token(
    user_id: int,
    role: str = UserRole.USER.value,
    email: Optional[str] = None,
    settings: Optional[AuthSettings] = None,
) -> str:
    """Issue a signed access token for a user."""
    settings = settings or get_app_settings().auth
    exp = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload: Dict[str, Any] = {"sub": str(user_id), "role": UserRole(role).value, "exp": exp}
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[AuthSettings] = None) -> Requester:
    """
    Verify a token and extract the caller identity.

    Raises:
        InvalidTokenError: If the signature, expiry or claims are invalid
    """
    settings = settings or get_app_settings().auth
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    try:
        user_id = int(payload["sub"])
        role = UserRole(payload.get("role", UserRole.USER.value))
    except ValueError as e:
        raise InvalidTokenError("Invalid token claims") from e

    return Requester(user_id=user_id, role=role)


def warn_if_weak_secret(settings: Optional[AuthSettings] = None) -> bool:
    """Log a warning when tokens are signed with the dev or a short secret."""
    settings = settings or get_app_settings().auth
    if not settings.has_weak_secret:
        return False
    logger.warning(
        "⚠️ JWT_SECRET is unset or shorter than 32 bytes; set a strong secret before deploying"
    )
    return True
