from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime, timezone
import logging
import os
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Configure base logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("app")

from app import models  # noqa: F401  registra todos los modelos en Base
from app.database import Base, engine, get_db
from app.middleware import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    register_middleware,
)
from app.routers import announcements, auth, clubs, events, stats, users
from app.schemas.common import HealthResponse
from app.utils.error_handlers import register_error_handlers
import uvicorn

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="ClubHub API",
    description="API for managing clubs, memberships, announcements and events",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)

# Registered after CORS so it runs first (prefix stripping + preflight)
register_middleware(app)
register_error_handlers(app)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(clubs.router, prefix="/clubs", tags=["clubs"])
app.include_router(announcements.router, prefix="/announcements", tags=["announcements"])
app.include_router(events.router, prefix="/events", tags=["events"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])


@app.get("/", response_model=HealthResponse)
@app.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        database = "disconnected"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "message": "ClubHub API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": database,
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=int(os.getenv("API_PORT", "5009")))
