"""
Configuración compartida para tests pytest
"""
import os

# Debe fijarse antes de importar la app: las tablas se crean al importar app.main
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models.club import Club
from app.models.user import User
from app.services.auth import get_password_hash


# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Crear base de datos de test y limpiarla después"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def override_get_db(db):
    """Override de get_db para tests"""
    def _get_db():
        try:
            yield db
        finally:
            pass
    return _get_db


@pytest.fixture
def client(override_get_db):
    """Cliente HTTP contra la app con la base de datos de test"""
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Fábrica de usuarios con contraseña hasheada"""
    def _make_user(email="member@example.com", password="secret", role="Member"):
        user = User(email=email, hashed_password=get_password_hash(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def sample_user(make_user):
    """Usuario de prueba con rol Member"""
    return make_user()


@pytest.fixture
def sample_club(db):
    """Club de prueba sin miembros"""
    club = Club(
        name="Chess",
        description="Weekly chess nights",
        image="https://img.example.com/chess.png",
    )
    db.add(club)
    db.commit()
    db.refresh(club)
    return club
