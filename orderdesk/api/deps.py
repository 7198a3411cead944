"""FastAPI dependencies for dependency injection."""

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from orderdesk.api.security import InvalidTokenError, decode_access_token  # noqa: E402
from orderdesk.application.services.order_service import OrderApplicationService  # noqa: E402
from orderdesk.domain.value_objects import Requester  # noqa: E402
from orderdesk.infrastructure.database import config as database_config  # noqa: E402

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return database_config.get_session_factory()


def get_order_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(session_factory)


def get_current_requester(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer),
) -> Requester:
    """Resolve the bearer token to the calling user.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_admin(requester: Requester = Depends(get_current_requester)) -> Requester:
    """Allow only admin callers.

    Raises:
        HTTPException: 403 for non-admin callers
    """
    if not requester.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return requester
