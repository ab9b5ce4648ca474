from sqlalchemy import and_
from sqlalchemy.orm import Session
from typing import List

from app.models.announcement import ClubAnnouncement, GeneralAnnouncement


def get_general_announcements(db: Session) -> List[GeneralAnnouncement]:
    return (
        db.query(GeneralAnnouncement)
        .order_by(GeneralAnnouncement.created_at.desc(), GeneralAnnouncement.id.desc())
        .all()
    )


def create_general_announcement(db: Session, text: str) -> GeneralAnnouncement:
    db_announcement = GeneralAnnouncement(text=text)
    db.add(db_announcement)
    db.commit()
    db.refresh(db_announcement)
    return db_announcement


def delete_general_announcement(db: Session, announcement_id: int) -> bool:
    deleted = (
        db.query(GeneralAnnouncement)
        .filter(GeneralAnnouncement.id == announcement_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return bool(deleted)


def create_club_announcement(db: Session, club_id: int, text: str) -> ClubAnnouncement:
    db_announcement = ClubAnnouncement(club_id=club_id, text=text)
    db.add(db_announcement)
    db.commit()
    db.refresh(db_announcement)
    return db_announcement


def delete_club_announcement(db: Session, club_id: int, announcement_id: int) -> bool:
    """Borra el anuncio solo si pertenece al club indicado"""
    deleted = (
        db.query(ClubAnnouncement)
        .filter(
            and_(
                ClubAnnouncement.id == announcement_id,
                ClubAnnouncement.club_id == club_id,
            )
        )
        .delete(synchronize_session=False)
    )
    db.commit()
    return bool(deleted)
