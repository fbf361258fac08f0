# soulsync/auth/session.py
# Reads the authenticated user id from the signed session cookie.
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status

from soulsync.core.config import get_session_settings, get_settings

_log = logging.getLogger(__name__)


class SessionTokenError(Exception):
    """Raised when a session token is missing, expired or fails verification."""
    def __init__(self, message="Session token is invalid", code="SESSION_INVALID"):
        self.message = message
        self.code = code
        super().__init__(self.message)


def create_session_token(user_id: int, expires_in: Optional[timedelta] = None) -> str:
    """Signs a session token whose subject is the user id."""
    settings = get_session_settings()
    now = datetime.now(timezone.utc)
    expires_in = expires_in or timedelta(seconds=settings.max_age_seconds)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def decode_session_token(token: str) -> int:
    """Returns the user id carried by a session token."""
    settings = get_session_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise SessionTokenError("Session has expired", code="SESSION_EXPIRED")
    except jwt.PyJWTError as e:
        raise SessionTokenError(f"Session token is invalid: {e}")

    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise SessionTokenError("Session subject is not a user id")


async def get_current_user_id(request: Request) -> int:
    """
    FastAPI dependency returning the id of the logged-in user.
    Responds 401 when the cookie is absent or cannot be verified.
    """
    settings = get_session_settings()
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        return decode_session_token(token)
    except SessionTokenError as e:
        _log.warning(f"Rejected session cookie: {e.code}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)


async def require_admin(user_id: int = Depends(get_current_user_id)) -> int:
    """FastAPI dependency that admits only the users listed in SOULSYNC_ADMIN_USER_IDS."""
    if user_id not in get_settings().admin_user_ids:
        _log.warning(f"User {user_id} denied access to an admin route")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user_id
