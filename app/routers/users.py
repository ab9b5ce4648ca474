from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
import logging

from app.crud import user as crud
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import UserEnvelope, UsersEnvelope, UserUpdate
from app.services.auth import get_password_hash
from app.utils.errors import ConflictError, NotFoundError
from app.utils.formatting import format_timestamp
from app.utils.validators import validate_body

router = APIRouter()

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


def _public_user(user: User) -> dict:
    # Nunca se expone el hash de la contraseña
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "created_at": format_timestamp(user.created_at),
    }


def _get_user_or_404(db: Session, user_id: int) -> User:
    db_user = crud.get_user(db, user_id)
    if db_user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return db_user


@router.get("", response_model=UsersEnvelope)
def read_users(db: Session = Depends(get_db)):
    return {"users": [_public_user(user) for user in crud.get_users(db)]}


@router.get("/{user_id:int}", response_model=UserEnvelope)
def read_user(user_id: int, db: Session = Depends(get_db)):
    db_user = _get_user_or_404(db, user_id)
    clubs = crud.get_user_clubs(db, user_id)
    user_data = _public_user(db_user)
    user_data["clubs"] = [{"id": club.id, "name": club.name} for club in clubs]
    return {"user": user_data}


@router.put("/{user_id:int}", response_model=MessageResponse)
def update_user(
    user_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    db_user = _get_user_or_404(db, user_id)
    data = validate_body(
        payload,
        UserUpdate,
        invalid_messages={"role": "Invalid role", "email": "Invalid email"},
    )

    update_data = {}
    if data.email is not None and data.email != db_user.email:
        existing = crud.get_user_by_email(db, data.email)
        if existing and existing.id != user_id:
            raise ConflictError(crud.EMAIL_IN_USE)
        update_data["email"] = data.email
    if data.password is not None:
        update_data["hashed_password"] = get_password_hash(data.password)
    if data.role is not None:
        update_data["role"] = data.role.value

    crud.update_user(db, db_user, update_data)
    logger.info(f"User updated: {user_id} fields={sorted(update_data)}")
    return {"message": "User updated successfully"}


@router.delete("/{user_id:int}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    db_user = _get_user_or_404(db, user_id)
    crud.delete_user(db, db_user)
    return {"message": "User deleted successfully"}
