from pydantic import EmailStr
from datetime import datetime
from todosphere.schemas.common import CamelModel


class UserCreate(CamelModel):
    name: str
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    user: UserResponse
    token: str
    refresh_token: str
    token_type: str = "bearer"
