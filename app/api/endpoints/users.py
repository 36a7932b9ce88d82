"""
User management endpoints.

- Listing and creating users requires an admin.
- Reading, updating, deleting and applying to jobs is allowed for the user
  themselves or an admin.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_self_or_admin_user
from app.core.security import create_token_for_user
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.user import (
    UserCreateRequest,
    UserDetailEnvelope,
    UserDetailResponse,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserTokenResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=UserTokenResponse)
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Add a new user. Admin only.

    This is not the registration endpoint: the new user may be an admin.
    Returns the user and a token for them.
    """
    new_user = user_crud.register(db, request, is_admin=request.is_admin)
    logger.info(f"Admin {admin_user.username} created user {new_user.username} (admin: {new_user.is_admin})")
    return {"user": new_user, "token": create_token_for_user(new_user)}


@router.get("/", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """List all users. Admin only."""
    return {"users": user_crud.get_multi(db)}


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_self_or_admin_user)
):
    """Retrieve a user and the ids of jobs they applied to."""
    user = user_crud.get(db, username)
    detail = UserDetailResponse(
        **UserResponse.model_validate(user).model_dump(),
        applications=[job.id for job in user.jobs],
    )
    return {"user": detail}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_self_or_admin_user)
):
    """
    Update firstName, lastName, password and/or email.

    An empty body is rejected with 400.
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    user = user_crud.update(db, username, data)
    logger.info(f"{current_user.username} updated user {username}: {sorted(data)}")
    return {"user": user}


@router.delete("/{username}")
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_self_or_admin_user)
):
    """Delete a user and their applications."""
    user_crud.delete(db, username)
    logger.info(f"{current_user.username} deleted user {username}")
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}")
def apply_to_job(
    username: str,
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_self_or_admin_user)
):
    """Apply to a job. Applying twice is rejected with 409."""
    user_crud.apply_to_job(db, username, job_id)
    logger.info(f"User {username} applied to job {job_id}")
    return {"applied": job_id}
