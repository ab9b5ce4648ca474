from enum import Enum


class UserRole(str, Enum):
    """Roles de usuario dentro de la plataforma"""

    ADMIN = "Admin"
    LEADER = "Leader"
    MEMBER = "Member"
