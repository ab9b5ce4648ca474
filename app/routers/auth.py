from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from app.crud import user as user_crud
from app.database import get_db
from app.schemas.auth import AuthEnvelope, LoginRequest, RegisterRequest
from app.services.auth import authenticate_user, get_password_hash
from app.utils.errors import AuthenticationError, ConflictError
from app.utils.formatting import format_timestamp
from app.utils.validators import ROLE_MESSAGE, validate_body

router = APIRouter()

CREDENTIALS_REQUIRED = "Email and password required"


def _auth_user(user, clubs) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "created_at": format_timestamp(user.created_at),
        "clubs": clubs,
    }


@router.post("/login", response_model=AuthEnvelope)
def login(
    payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)
):
    credentials = validate_body(
        payload,
        LoginRequest,
        required=("email", "password"),
        missing_message=CREDENTIALS_REQUIRED,
    )
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise AuthenticationError("Invalid credentials")

    clubs = user_crud.get_user_club_ids(db, user.id)
    return {"user": _auth_user(user, clubs)}


@router.post("/register", response_model=AuthEnvelope, status_code=status.HTTP_201_CREATED)
def register(
    payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)
):
    data = validate_body(
        payload,
        RegisterRequest,
        required=("email", "password"),
        missing_message=CREDENTIALS_REQUIRED,
        invalid_messages={"role": ROLE_MESSAGE, "email": "Invalid email"},
    )
    if user_crud.get_user_by_email(db, data.email):
        raise ConflictError(user_crud.USER_EXISTS)

    user = user_crud.create_user(
        db,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        role=data.role.value,
    )
    return {"user": _auth_user(user, [])}
