from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
import logging

from app.models.event import Event
from app.schemas.event import EventCreate

logger = logging.getLogger(__name__)


def get_event(db: Session, event_id: int) -> Optional[Event]:
    return (
        db.query(Event)
        .options(joinedload(Event.club))
        .filter(Event.id == event_id)
        .first()
    )


def get_events(db: Session) -> List[Event]:
    return (
        db.query(Event)
        .options(joinedload(Event.club))
        .order_by(Event.event_date.asc(), Event.id.asc())
        .all()
    )


def create_event(db: Session, event: EventCreate) -> Event:
    db_event = Event(
        title=event.title,
        description=event.description,
        event_date=event.date,
        club_id=event.club_id,
    )
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    logger.info(f"Event created: {db_event.id} (club={db_event.club_id})")
    return db_event


def update_event(db: Session, db_event: Event, update_data: dict) -> Event:
    for field, value in update_data.items():
        setattr(db_event, field, value)

    db.commit()
    db.refresh(db_event)
    return db_event


def delete_event(db: Session, db_event: Event) -> None:
    db.delete(db_event)
    db.commit()
