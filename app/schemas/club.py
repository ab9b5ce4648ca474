from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.announcement import AnnouncementResponse
from app.schemas.event import EventSummary


class ClubCreate(BaseModel):
    name: str
    description: str
    image: str
    admin_id: Optional[int] = Field(None, alias="adminId")
    leader_id: Optional[int] = Field(None, alias="leaderId")

    class Config:
        populate_by_name = True


class ClubUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    admin_id: Optional[int] = Field(None, alias="adminId")
    leader_id: Optional[int] = Field(None, alias="leaderId")

    class Config:
        populate_by_name = True


class MembershipRequest(BaseModel):
    user_id: int = Field(alias="userId")

    class Config:
        populate_by_name = True


class ClubResponse(BaseModel):
    id: int
    name: str
    description: str
    image: str
    admin_id: Optional[int] = Field(None, alias="adminId")
    leader_id: Optional[int] = Field(None, alias="leaderId")
    members: List[int] = []
    announcements: List[AnnouncementResponse] = []
    events: List[EventSummary] = []

    class Config:
        populate_by_name = True


class ClubEnvelope(BaseModel):
    club: ClubResponse


class ClubsEnvelope(BaseModel):
    clubs: List[ClubResponse]
