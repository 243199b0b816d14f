"""
Dependency Container
====================

FastAPI dependencies: services from the DI container and the
authenticated caller.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from devconnect.application.services.profile_service import ProfileService
from devconnect.core.security import decode_access_token
from devconnect.di.container import get_container

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_profile_service() -> ProfileService:
    """
    Get profile service instance (singleton).

    Returns:
        ProfileService instance
    """
    container = get_container()
    return container.get(ProfileService)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    x_auth_token: Optional[str] = Header(None, alias="x-auth-token"),
) -> str:
    """
    Resolve the caller's user id from the request token.

    Checks in order:
    1. Authorization header (Bearer token)
    2. x-auth-token header
    """
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(token)
    except ValueError as e:
        logger.info("Rejected token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
            headers={"WWW-Authenticate": "Bearer"},
        )
