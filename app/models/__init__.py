from app.models.user import User
from app.models.club import Club
from app.models.membership import Membership
from app.models.announcement import GeneralAnnouncement, ClubAnnouncement
from app.models.event import Event

# This makes the models directory a Python package and ensures all models are loaded
