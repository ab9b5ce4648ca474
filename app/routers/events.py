from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from app.crud import club as club_crud
from app.crud import event as crud
from app.database import get_db
from app.models.event import Event
from app.schemas.common import MessageResponse
from app.schemas.event import EventCreate, EventEnvelope, EventsEnvelope, EventUpdate
from app.utils.errors import NotFoundError
from app.utils.validators import validate_body

router = APIRouter()

EVENT_NOT_FOUND = "Event not found"


def _event_data(event: Event) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "date": event.event_date,
        "club_id": event.club_id,
        "club_name": event.club.name if event.club else None,
    }


def _get_event_or_404(db: Session, event_id: int) -> Event:
    db_event = crud.get_event(db, event_id)
    if db_event is None:
        raise NotFoundError(EVENT_NOT_FOUND)
    return db_event


def _check_club(db: Session, club_id: Optional[int]) -> None:
    if club_id is not None and not club_crud.club_exists(db, club_id):
        raise NotFoundError("Club not found")


@router.get("", response_model=EventsEnvelope)
def read_events(db: Session = Depends(get_db)):
    return {"events": [_event_data(event) for event in crud.get_events(db)]}


@router.post("", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)
):
    event = validate_body(
        payload,
        EventCreate,
        required=("title", "description", "date"),
        missing_message="Title, description, and date required",
        invalid_messages={"date": "Invalid date", "clubId": "Invalid club ID"},
    )
    _check_club(db, event.club_id)
    db_event = crud.create_event(db, event)
    return {"event": _event_data(db_event)}


@router.get("/{event_id:int}", response_model=EventEnvelope)
def read_event(event_id: int, db: Session = Depends(get_db)):
    return {"event": _event_data(_get_event_or_404(db, event_id))}


@router.put("/{event_id:int}", response_model=MessageResponse)
def update_event(
    event_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    event = validate_body(
        payload,
        EventUpdate,
        invalid_messages={"date": "Invalid date", "clubId": "Invalid club ID"},
    )
    db_event = _get_event_or_404(db, event_id)
    _check_club(db, event.club_id)

    update_data = event.model_dump(exclude_none=True)
    if "date" in update_data:
        update_data["event_date"] = update_data.pop("date")
    crud.update_event(db, db_event, update_data)
    return {"message": "Event updated successfully"}


@router.delete("/{event_id:int}", response_model=MessageResponse)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    db_event = _get_event_or_404(db, event_id)
    crud.delete_event(db, db_event)
    return {"message": "Event deleted successfully"}
