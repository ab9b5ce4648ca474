from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.models.membership import Membership
from app.utils.errors import ConflictError

logger = logging.getLogger(__name__)

ALREADY_MEMBER = "Already a member of this club"


def get_membership(db: Session, club_id: int, user_id: int) -> Optional[Membership]:
    return (
        db.query(Membership)
        .filter(and_(Membership.club_id == club_id, Membership.user_id == user_id))
        .first()
    )


def create_membership(db: Session, club_id: int, user_id: int) -> Membership:
    db_membership = Membership(club_id=club_id, user_id=user_id)
    db.add(db_membership)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Duplicate membership on insert: club={club_id} user={user_id}")
        raise ConflictError(ALREADY_MEMBER)
    db.refresh(db_membership)
    logger.info(f"User {user_id} joined club {club_id}")
    return db_membership


def delete_membership(db: Session, club_id: int, user_id: int) -> bool:
    """Elimina la membresía; devuelve False si el usuario no era miembro"""
    deleted = (
        db.query(Membership)
        .filter(and_(Membership.club_id == club_id, Membership.user_id == user_id))
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info(f"User {user_id} left club {club_id}")
    return bool(deleted)
