from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from app.utils.validators import parse_iso_date


class EventCreate(BaseModel):
    title: str
    description: str
    date: str
    club_id: Optional[int] = Field(None, alias="clubId")

    class Config:
        populate_by_name = True

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        return parse_iso_date(value)


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    club_id: Optional[int] = Field(None, alias="clubId")

    class Config:
        populate_by_name = True

    @field_validator("date")
    @classmethod
    def check_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return parse_iso_date(value)


class EventSummary(BaseModel):
    """Evento tal como se embebe dentro de un club"""

    id: int
    title: str
    description: str
    date: str


class EventResponse(EventSummary):
    club_id: Optional[int] = Field(None, alias="clubId")
    club_name: Optional[str] = Field(None, alias="clubName")

    class Config:
        populate_by_name = True


class EventEnvelope(BaseModel):
    event: EventResponse


class EventsEnvelope(BaseModel):
    events: List[EventResponse]
