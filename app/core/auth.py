# app/core/auth.py
from typing import Any

from bson import ObjectId
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from app.core.config import get_settings
from app.schemas.user import AuthUser

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header does not raise here,
#   require_auth turns it into our own 401 body.
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an access token issued by `create_access_token`.

    Verification:
      - signature (JWT_ALG using JWT_SECRET)
      - expiration time (exp)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise _unauthorized("Invalid or expired token")


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthUser | None:
    """
    Resolve the caller identity from the bearer token.

    Flow:
      1. No Authorization header => anonymous => None.
      2. Decode JWT => extract 'sub' (user id) and 'email'.
      3. 'sub' must be a valid ObjectId.

    The token is trusted on its own; no database lookup happens here.

    Raises:
        HTTPException(401): if token is malformed or missing required claims.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    email = payload.get("email")

    if not sub or not email or not ObjectId.is_valid(sub):
        raise _unauthorized("Invalid or expired token")

    return AuthUser(id=sub, email=email)


def require_auth(user: AuthUser | None = Depends(get_current_user)) -> AuthUser:
    """
    Enforce authentication.

    Raises:
        HTTPException(401): if no token was supplied.
    """
    if user is None:
        raise _unauthorized("Authentication required")
    return user
