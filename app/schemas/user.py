from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from app.enums.user_role import UserRole


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None


class UserClubSummary(BaseModel):
    id: int
    name: str


class UserResponse(BaseModel):
    id: int
    email: str
    role: UserRole
    created_at: Optional[str] = Field(None, alias="createdAt")

    class Config:
        populate_by_name = True


class UserDetailResponse(UserResponse):
    clubs: List[UserClubSummary] = []


class UserEnvelope(BaseModel):
    user: UserDetailResponse


class UsersEnvelope(BaseModel):
    users: List[UserResponse]
