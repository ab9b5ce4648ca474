"""
Validación y normalización de cuerpos de petición.

UNA SOLA FUENTE DE VERDAD para decidir si un campo "está presente":
un campo ausente, nulo o con una cadena vacía (tras quitar espacios) se
considera ausente. Los handlers declaran qué campos exigen y el esquema
pydantic se encarga de tipos y enumerados.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.utils.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

ROLE_MESSAGE = "Invalid role. Must be Admin, Leader, or Member"
EMPTY_UPDATE_MESSAGE = "At least one field required"
TEXT_REQUIRED = "Announcement text required"


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def normalize_payload(payload: Any) -> Dict[str, Any]:
    """
    Devuelve una copia del cuerpo sin campos en blanco y con las cadenas recortadas.

    Un cuerpo ausente equivale a un objeto vacío; cualquier otra cosa que
    no sea un objeto JSON es un error de validación.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    normalized = {}
    for key, value in payload.items():
        if is_blank(value):
            continue
        normalized[key] = value.strip() if isinstance(value, str) else value
    return normalized


def _field_keys(schema: Type[BaseModel]) -> set:
    keys = set()
    for name, field in schema.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


def validate_body(
    payload: Any,
    schema: Type[SchemaT],
    required: Iterable[str] = (),
    missing_message: Optional[str] = None,
    invalid_messages: Optional[Dict[str, str]] = None,
    require_any: bool = False,
) -> SchemaT:
    """
    Valida un cuerpo de petición contra un esquema.

    Args:
        payload: Cuerpo JSON ya parseado
        schema: Modelo pydantic de la operación
        required: Claves JSON obligatorias (se comprueban en orden)
        missing_message: Mensaje cuando falta una clave obligatoria
        invalid_messages: Mensajes por clave cuando el valor no es válido
        require_any: Exige al menos un campo conocido (actualizaciones parciales)

    Returns:
        Instancia del esquema con los campos normalizados

    Raises:
        ValidationError: con el primer requisito incumplido
    """
    data = normalize_payload(payload)

    for key in required:
        if key not in data:
            raise ValidationError(missing_message or f"{key} is required")

    if require_any and not _field_keys(schema).intersection(data):
        raise ValidationError(EMPTY_UPDATE_MESSAGE)

    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "body"
        if invalid_messages and field in invalid_messages:
            raise ValidationError(invalid_messages[field]) from exc
        raise ValidationError(f"Invalid value for {field}") from exc


def parse_iso_date(value: str) -> str:
    """Comprueba que la fecha sea ISO-8601 (fecha o fecha-hora) y la devuelve sin cambios."""
    try:
        date.fromisoformat(value)
        return value
    except ValueError:
        pass
    # fromisoformat no acepta el sufijo "Z" antes de Python 3.11
    datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


def normalize_email(email: str) -> str:
    """
    Normaliza un email igual que ``EmailStr`` al registrar (dominio en minúsculas).

    Un email sintácticamente inválido se devuelve recortado: la búsqueda
    no encontrará a nadie y el login responde 401 como con cualquier fallo.
    """
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email.strip()
