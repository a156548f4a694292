"""Pydantic DTOs for registration and login."""

from datetime import datetime

from pydantic import BaseModel


class UserCreate(BaseModel):
    """Typed form of a registration payload that already passed the rule table."""

    first_name: str
    last_name: str
    email: str
    password: str
    avatar: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    """Public user profile: never includes the password hash."""

    id: int
    first_name: str
    last_name: str
    email: str
    avatar: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    user: UserResponse
    access_token: str
    refresh_token: str
