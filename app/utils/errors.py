"""
Jerarquía de errores de la API.

Cada error lleva el código HTTP y un mensaje apto para el cliente; el
manejador global los convierte en el sobre ``{"error": mensaje}``.
"""


class APIError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(APIError):
    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(APIError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(APIError):
    status_code = 404
    default_message = "Not found"


class ConflictError(APIError):
    status_code = 409
    default_message = "Conflict"


class InternalError(APIError):
    status_code = 500
