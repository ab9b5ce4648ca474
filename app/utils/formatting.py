from datetime import datetime
from typing import Optional

DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Marca de tiempo legible ("YYYY-MM-DD HH:MM:SS") para las respuestas."""
    if value is None:
        return None
    return value.strftime(DISPLAY_TIMESTAMP_FORMAT)


def announcement_data(announcement, include_club: bool = False) -> dict:
    """Anuncio general o de club como dict listo para el esquema de respuesta"""
    data = {
        "id": announcement.id,
        "text": announcement.text,
        "date": format_timestamp(announcement.created_at),
    }
    if include_club:
        data["club_id"] = announcement.club_id
    return data
