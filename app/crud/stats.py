from sqlalchemy.orm import Session

from app.models.club import Club
from app.models.event import Event
from app.models.membership import Membership
from app.models.user import User


def get_stats(db: Session) -> dict:
    return {
        "total_clubs": db.query(Club).count(),
        "total_users": db.query(User).count(),
        "total_events": db.query(Event).count(),
        "total_memberships": db.query(Membership).count(),
    }
