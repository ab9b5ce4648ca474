from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from dotenv import load_dotenv
import os

from app.crud import announcement as announcement_crud
from app.crud import club as crud
from app.crud import membership as membership_crud
from app.crud import user as user_crud
from app.database import get_db
from app.models.club import Club
from app.schemas.announcement import (
    AnnouncementCreate,
    ClubAnnouncementEnvelope,
    ClubAnnouncementsEnvelope,
)
from app.schemas.club import (
    ClubCreate,
    ClubEnvelope,
    ClubsEnvelope,
    ClubUpdate,
    MembershipRequest,
)
from app.schemas.common import MessageResponse
from app.utils.errors import ConflictError, NotFoundError
from app.utils.formatting import announcement_data
from app.utils.validators import TEXT_REQUIRED, validate_body

load_dotenv()

router = APIRouter()

# Cuántos anuncios recientes se embeben por club en el listado
ANNOUNCEMENT_PREVIEW_LIMIT = int(os.getenv("CLUB_ANNOUNCEMENT_PREVIEW_LIMIT", "10"))

CLUB_NOT_FOUND = "Club not found"
USER_ID_REQUIRED = "User ID required"


def _club_data(db: Session, club: Club, announcement_limit: Optional[int] = None) -> dict:
    """
    Construye la representación completa de un club.

    Cada parte (miembros, anuncios, eventos) sale de una consulta distinta
    sin transacción común, así que no es una foto atómica del club.
    """
    announcements = crud.get_club_announcements(db, club.id, limit=announcement_limit)
    events = crud.get_club_events(db, club.id)
    return {
        "id": club.id,
        "name": club.name,
        "description": club.description,
        "image": club.image,
        "admin_id": club.admin_id,
        "leader_id": club.leader_id,
        "members": crud.get_member_ids(db, club.id),
        "announcements": [announcement_data(a) for a in announcements],
        "events": [
            {
                "id": event.id,
                "title": event.title,
                "description": event.description,
                "date": event.event_date,
            }
            for event in events
        ],
    }


def _get_club_or_404(db: Session, club_id: int) -> Club:
    db_club = crud.get_club(db, club_id=club_id)
    if db_club is None:
        raise NotFoundError(CLUB_NOT_FOUND)
    return db_club


@router.get("", response_model=ClubsEnvelope)
def read_clubs(db: Session = Depends(get_db)):
    clubs = crud.get_clubs(db)
    return {
        "clubs": [
            _club_data(db, club, announcement_limit=ANNOUNCEMENT_PREVIEW_LIMIT)
            for club in clubs
        ]
    }


@router.post("", response_model=ClubEnvelope, status_code=status.HTTP_201_CREATED)
def create_club(
    payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)
):
    club = validate_body(
        payload,
        ClubCreate,
        required=("name", "description", "image"),
        missing_message="Name, description, and image required",
    )
    created_club = crud.create_club(db=db, club=club)
    return {"club": _club_data(db, created_club)}


@router.get("/{club_id:int}", response_model=ClubEnvelope)
def read_club(club_id: int, db: Session = Depends(get_db)):
    db_club = _get_club_or_404(db, club_id)
    return {"club": _club_data(db, db_club)}


@router.put("/{club_id:int}", response_model=MessageResponse)
def update_club(
    club_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    club = validate_body(payload, ClubUpdate, require_any=True)
    db_club = _get_club_or_404(db, club_id)
    crud.update_club(db=db, db_club=db_club, update_data=club.model_dump(exclude_none=True))
    return {"message": "Club updated successfully"}


@router.delete("/{club_id:int}", response_model=MessageResponse)
def delete_club(club_id: int, db: Session = Depends(get_db)):
    db_club = _get_club_or_404(db, club_id)
    crud.delete_club(db=db, db_club=db_club)
    return {"message": "Club deleted successfully"}


@router.post("/{club_id:int}/join", response_model=MessageResponse)
def join_club(
    club_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    membership = validate_body(
        payload,
        MembershipRequest,
        required=("userId",),
        missing_message=USER_ID_REQUIRED,
    )
    _get_club_or_404(db, club_id)
    if user_crud.get_user(db, membership.user_id) is None:
        raise NotFoundError("User not found")

    if membership_crud.get_membership(db, club_id, membership.user_id):
        raise ConflictError(membership_crud.ALREADY_MEMBER)

    membership_crud.create_membership(db, club_id=club_id, user_id=membership.user_id)
    return {"message": "Successfully joined club"}


@router.post("/{club_id:int}/leave", response_model=MessageResponse)
def leave_club(
    club_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    membership = validate_body(
        payload,
        MembershipRequest,
        required=("userId",),
        missing_message=USER_ID_REQUIRED,
    )
    if not membership_crud.delete_membership(db, club_id=club_id, user_id=membership.user_id):
        raise NotFoundError("Not a member of this club")
    return {"message": "Successfully left club"}


@router.get("/{club_id:int}/announcements", response_model=ClubAnnouncementsEnvelope)
def read_club_announcements(club_id: int, db: Session = Depends(get_db)):
    announcements = crud.get_club_announcements(db, club_id)
    return {
        "announcements": [announcement_data(a, include_club=True) for a in announcements]
    }


@router.post(
    "/{club_id:int}/announcements",
    response_model=ClubAnnouncementEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def create_club_announcement(
    club_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    data = validate_body(
        payload, AnnouncementCreate, required=("text",), missing_message=TEXT_REQUIRED
    )
    _get_club_or_404(db, club_id)
    announcement = announcement_crud.create_club_announcement(db, club_id, data.text)
    return {"announcement": announcement_data(announcement, include_club=True)}


@router.delete(
    "/{club_id:int}/announcements/{announcement_id:int}",
    response_model=MessageResponse,
)
def delete_club_announcement(
    club_id: int, announcement_id: int, db: Session = Depends(get_db)
):
    # Igual que los anuncios generales: borrar un id inexistente no es un error
    announcement_crud.delete_club_announcement(db, club_id, announcement_id)
    return {"message": "Announcement deleted successfully"}
