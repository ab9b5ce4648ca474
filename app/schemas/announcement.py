from pydantic import BaseModel, Field
from typing import List, Optional


class AnnouncementCreate(BaseModel):
    text: str


class AnnouncementResponse(BaseModel):
    id: int
    text: str
    date: Optional[str] = None


class ClubAnnouncementResponse(AnnouncementResponse):
    club_id: int = Field(alias="clubId")

    class Config:
        populate_by_name = True


class AnnouncementEnvelope(BaseModel):
    announcement: AnnouncementResponse


class AnnouncementsEnvelope(BaseModel):
    announcements: List[AnnouncementResponse]


class ClubAnnouncementEnvelope(BaseModel):
    announcement: ClubAnnouncementResponse


class ClubAnnouncementsEnvelope(BaseModel):
    announcements: List[ClubAnnouncementResponse]
