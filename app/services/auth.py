from typing import Optional
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from dotenv import load_dotenv
import logging
import os
import warnings

from app.crud import user as user_crud
from app.models.user import User
from app.utils.validators import normalize_email

# Suppress the bcrypt warning
warnings.filterwarnings("ignore", ".*bcrypt version.*")
warnings.filterwarnings("ignore", ".*trapped.*error reading bcrypt version.*")

load_dotenv()

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Devuelve el usuario si email y contraseña coinciden, None en cualquier otro caso.

    No distingue "email inexistente" de "contraseña incorrecta"; cuando el
    usuario no existe se ejecuta igualmente una verificación ficticia para
    que ambos caminos tarden lo mismo.
    """
    user = user_crud.get_user_by_email(db, normalize_email(email))
    if not user:
        pwd_context.dummy_verify()
        return None

    if not verify_password(password, user.hashed_password):
        logger.info(f"Failed login attempt for user {user.id}")
        return None

    return user
