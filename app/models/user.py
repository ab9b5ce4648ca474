from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime

from app.enums.user_role import UserRole


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.MEMBER.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    memberships = relationship(
        "Membership", back_populates="user", cascade="all, delete-orphan"
    )
