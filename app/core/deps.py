"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.permissions import is_admin, is_self_or_admin
from app.core.security import decode_token
from app.models.user import User

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is reported as 401 like a bad token
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT
    3. Fetches the user from the database

    Raises:
        HTTPException 401: If token is missing/invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
        username: str = payload.get("sub")
        if username is None:
            raise credentials_exception

    except JWTError:
        raise credentials_exception

    user = db.get(User, username)
    if user is None:
        raise credentials_exception

    return user


async def get_admin_user(
    user: User = Depends(get_current_user),
) -> User:
    """
    Get the current user and ensure they are an admin.

    Raises:
        HTTPException 403: If the user is not an admin
    """
    if not is_admin(user.is_admin):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )

    return user


async def get_self_or_admin_user(
    username: str,
    user: User = Depends(get_current_user),
) -> User:
    """
    Allow access to /users/{username} routes for that user or an admin.

    ``username`` is taken from the route path.

    Raises:
        HTTPException 403: If the caller is neither the target user nor an admin
    """
    if not is_self_or_admin(user.username, username, user.is_admin):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not permitted to access this user"
        )

    return user
