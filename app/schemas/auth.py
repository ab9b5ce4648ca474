from pydantic import BaseModel, EmailStr
from typing import List

from app.enums.user_role import UserRole
from app.schemas.user import UserResponse


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    role: UserRole = UserRole.MEMBER


class AuthUserResponse(UserResponse):
    clubs: List[int] = []


class AuthEnvelope(BaseModel):
    user: AuthUserResponse
