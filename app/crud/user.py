from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.models.club import Club
from app.models.membership import Membership
from app.models.user import User
from app.utils.errors import ConflictError

logger = logging.getLogger(__name__)

USER_EXISTS = "User already exists"
EMAIL_IN_USE = "Email already in use"


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def create_user(db: Session, email: str, hashed_password: str, role: str) -> User:
    db_user = User(email=email, hashed_password=hashed_password, role=role)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Otro registro concurrente ganó la carrera entre la comprobación y el insert
        db.rollback()
        logger.warning(f"Unique email violated on insert: {email}")
        raise ConflictError(USER_EXISTS)
    db.refresh(db_user)
    logger.info(f"User registered: {db_user.id}")
    return db_user


def update_user(db: Session, db_user: User, update_data: dict) -> User:
    for field, value in update_data.items():
        setattr(db_user, field, value)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Unique email violated on update of user {db_user.id}")
        raise ConflictError(EMAIL_IN_USE)
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, db_user: User) -> None:
    """Elimina el usuario, sus membresías y las referencias admin/líder en clubs"""
    user_id = db_user.id
    db.query(Club).filter(Club.admin_id == user_id).update(
        {Club.admin_id: None}, synchronize_session=False
    )
    db.query(Club).filter(Club.leader_id == user_id).update(
        {Club.leader_id: None}, synchronize_session=False
    )
    db.delete(db_user)
    db.commit()
    logger.info(f"User deleted: {user_id}")


def get_user_club_ids(db: Session, user_id: int) -> List[int]:
    rows = (
        db.query(Membership.club_id)
        .filter(Membership.user_id == user_id)
        .order_by(Membership.club_id)
        .all()
    )
    return [row.club_id for row in rows]


def get_user_clubs(db: Session, user_id: int) -> List[Club]:
    return (
        db.query(Club)
        .join(Membership, Membership.club_id == Club.id)
        .filter(Membership.user_id == user_id)
        .order_by(Club.id)
        .all()
    )
