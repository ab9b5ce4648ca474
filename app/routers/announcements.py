from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from app.crud import announcement as crud
from app.database import get_db
from app.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementEnvelope,
    AnnouncementsEnvelope,
)
from app.schemas.common import MessageResponse
from app.utils.formatting import announcement_data
from app.utils.validators import TEXT_REQUIRED, validate_body

router = APIRouter()


@router.get("", response_model=AnnouncementsEnvelope)
def read_announcements(db: Session = Depends(get_db)):
    announcements = crud.get_general_announcements(db)
    return {"announcements": [announcement_data(a) for a in announcements]}


@router.post("", response_model=AnnouncementEnvelope, status_code=status.HTTP_201_CREATED)
def create_announcement(
    payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)
):
    data = validate_body(
        payload, AnnouncementCreate, required=("text",), missing_message=TEXT_REQUIRED
    )
    announcement = crud.create_general_announcement(db, data.text)
    return {"announcement": announcement_data(announcement)}


@router.delete("/{announcement_id:int}", response_model=MessageResponse)
def delete_announcement(announcement_id: int, db: Session = Depends(get_db)):
    # Sin comprobación previa: un id inexistente también responde éxito
    crud.delete_general_announcement(db, announcement_id)
    return {"message": "Announcement deleted successfully"}
