from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class Event(Base):
    __tablename__ = "events"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    # Fecha ISO-8601 tal como la envía el cliente; el orden lexicográfico es cronológico
    event_date = Column(String, nullable=False, index=True)
    # NULL = evento de toda la plataforma
    club_id = Column(
        Integer, ForeignKey("clubs.id", ondelete="CASCADE"), nullable=True, index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    club = relationship("Club", back_populates="events")
