"""User schemas used for registration and responses."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from backend.app.schemas.choices import UserRole


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    role: Literal["student", "org"] = "student"


class UserRead(BaseModel):
    id: int
    email: EmailStr
    role: UserRole
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
