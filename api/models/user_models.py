# api/models/user_models.py
from pydantic import EmailStr, Field

from api.models.base import CamelModel


class UserRead(CamelModel):
    id: int
    name: str
    email: str


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., max_length=72)


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
