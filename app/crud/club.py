from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.models.announcement import ClubAnnouncement
from app.models.club import Club
from app.models.event import Event
from app.models.membership import Membership
from app.schemas.club import ClubCreate

logger = logging.getLogger(__name__)


def get_club(db: Session, club_id: int) -> Optional[Club]:
    return db.query(Club).filter(Club.id == club_id).first()


def get_clubs(db: Session) -> List[Club]:
    return db.query(Club).order_by(Club.id).all()


def club_exists(db: Session, club_id: int) -> bool:
    return db.query(Club.id).filter(Club.id == club_id).first() is not None


def create_club(db: Session, club: ClubCreate) -> Club:
    db_club = Club(**club.model_dump())
    db.add(db_club)
    db.commit()
    db.refresh(db_club)
    logger.info(f"Club created: {db_club.id} ({db_club.name})")
    return db_club


def update_club(db: Session, db_club: Club, update_data: dict) -> Club:
    # Solo se tocan los campos recibidos; el resto conserva su valor
    for field, value in update_data.items():
        setattr(db_club, field, value)

    db.commit()
    db.refresh(db_club)
    return db_club


def delete_club(db: Session, db_club: Club) -> None:
    """Elimina el club junto con sus membresías, anuncios y eventos"""
    club_id = db_club.id
    db.delete(db_club)
    db.commit()
    logger.info(f"Club deleted: {club_id}")


def get_member_ids(db: Session, club_id: int) -> List[int]:
    rows = (
        db.query(Membership.user_id)
        .filter(Membership.club_id == club_id)
        .order_by(Membership.id)
        .all()
    )
    return [row.user_id for row in rows]


def get_club_announcements(
    db: Session, club_id: int, limit: Optional[int] = None
) -> List[ClubAnnouncement]:
    query = (
        db.query(ClubAnnouncement)
        .filter(ClubAnnouncement.club_id == club_id)
        .order_by(ClubAnnouncement.created_at.desc(), ClubAnnouncement.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_club_events(db: Session, club_id: int) -> List[Event]:
    return (
        db.query(Event)
        .filter(Event.club_id == club_id)
        .order_by(Event.event_date.asc(), Event.id.asc())
        .all()
    )
