"""
Pydantic schemas for users and authentication.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class UserRegisterRequest(_CamelModel):
    """Request schema for self-registration (never creates an admin)."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Request schema for admin-created users, which may be admins."""
    is_admin: bool = False


class UserLoginRequest(_CamelModel):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class UserUpdateRequest(_CamelModel):
    """
    Partial user update. Only fields present in the body are written.

    The username and admin flag cannot be changed here.
    """
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name", "password", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str


class UserResponse(BaseModel):
    """User profile response (no sensitive data)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserDetailResponse(UserResponse):
    """User profile with the ids of jobs applied to."""
    applications: List[int] = []


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse


class UserTokenResponse(BaseModel):
    user: UserResponse
    token: str


class UserListResponse(BaseModel):
    users: List[UserResponse]
