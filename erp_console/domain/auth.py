"""
Authentication wire shapes
"""
from typing import Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel


class User(WireModel):
    id: str
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)


class LoginResponse(WireModel):
    token: str
    user: Optional[User] = None
