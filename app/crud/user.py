"""
CRUD operations for User model and job applications.
"""

from typing import Any, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import get_password_hash, verify_password
from app.core.sql import bind_params, sql_for_partial_update
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.user import UserRegisterRequest

COLUMN_ALIASES = {
    "firstName": "first_name",
    "lastName": "last_name",
    "password": "hashed_password",
}


def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    """Return the user if the password matches, None otherwise."""
    user = get_by_username(db, username)
    if user is None or not verify_password(password, user.hashed_password):
        return None
    return user


def register(db: Session, user_data: UserRegisterRequest, is_admin: bool = False) -> User:
    """
    Create a user with a hashed password.

    Raises:
        ConflictError: If the username is taken
    """
    if get_by_username(db, user_data.username):
        raise ConflictError(f"Duplicate username: {user_data.username}")

    db_user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=is_admin,
    )

    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Duplicate username: {user_data.username}")
    db.refresh(db_user)

    return db_user


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.get(User, username)


def get(db: Session, username: str) -> User:
    """
    Raises:
        NotFoundError: If no such user exists
    """
    user = get_by_username(db, username)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    return user


def get_multi(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()


def update(db: Session, username: str, data: Mapping[str, Any]) -> User:
    """
    Update only the supplied fields of a user. A new password is hashed
    before it is written.

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no such user exists
    """
    if data.get("password") is not None:
        data = {**data, "password": get_password_hash(data["password"])}

    clause = sql_for_partial_update(data, COLUMN_ALIASES)
    username_idx = len(clause.values) + 1
    statement, params = bind_params(
        f"UPDATE users SET {clause.set_clause} WHERE username = ${username_idx}",
        [*clause.values, username],
    )

    result = db.execute(statement, params)
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    return get(db, username)


def delete(db: Session, username: str) -> None:
    """
    Raises:
        NotFoundError: If no such user exists
    """
    user = get(db, username)
    db.delete(user)
    db.commit()


def apply_to_job(db: Session, username: str, job_id: int) -> None:
    """
    Record that a user applied to a job.

    Raises:
        NotFoundError: If the user or job does not exist
        ConflictError: If the user already applied to this job
    """
    user = get(db, username)
    job = job_crud.get(db, job_id)

    if job in user.jobs:
        raise ConflictError(f"Already applied to job {job_id}")

    user.jobs.append(job)
    db.commit()
