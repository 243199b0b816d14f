"""
Token helpers
=============

Signs and verifies the bearer tokens issued by the auth service of the
surrounding application. Payload shape: {"user": {"id": "<ObjectId hex>"}}.
"""
from datetime import timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from devconnect.core.config import get_settings
from devconnect.utils.datetime_utils import now


def create_access_token(user_id: str, expires_minutes: Optional[int] = None) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: User identifier to embed in the token
        expires_minutes: Optional override for the token lifetime

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    expire = now() + timedelta(minutes=expires_minutes or settings.jwt_expire_minutes)
    payload: Dict[str, Any] = {
        "user": {"id": user_id},
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """
    Decode a token and return the user id it carries.

    Raises:
        ValueError: If the token is malformed, expired or missing the user id
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc

    user = payload.get("user") or {}
    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise ValueError("Token has no user id")
    return user_id
