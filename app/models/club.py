from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime


class Club(Base):
    __tablename__ = "clubs"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    image = Column(String, nullable=False)
    # Referencias blandas a usuarios: no se verifica su existencia al escribir
    admin_id = Column(Integer, nullable=True, index=True)
    leader_id = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    memberships = relationship(
        "Membership", back_populates="club", cascade="all, delete-orphan"
    )
    announcements = relationship(
        "ClubAnnouncement", back_populates="club", cascade="all, delete-orphan"
    )
    events = relationship("Event", back_populates="club", cascade="all, delete-orphan")
