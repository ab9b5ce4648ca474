from fastapi import FastAPI, Request, Response
from typing import List, Optional
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger("app")

API_PREFIX = "/api"

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]


def strip_api_prefix(path: str) -> str:
    """/api/clubs -> /clubs; /api -> /"""
    if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
        return path[len(API_PREFIX):] or "/"
    return path


def preflight_headers(origin: Optional[str], allowed_origins: List[str]) -> dict:
    """
    Cabeceras CORS para la respuesta 204 de un OPTIONS.

    Con "*" se permite cualquier origen; si no, solo se devuelve el origen
    de la petición cuando está en la lista configurada.
    """
    headers = {
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
    }
    if "*" in allowed_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers


def register_middleware(app: FastAPI) -> None:
    """Middleware transversales: prefijo /api, preflight OPTIONS y log de peticiones"""

    @app.middleware("http")
    async def handle_request(request: Request, call_next):
        path = strip_api_prefix(request.url.path)
        request.scope["path"] = path

        logger.info(f"[{request.method}] {path}")

        if request.method == "OPTIONS":
            return Response(
                status_code=204,
                headers=preflight_headers(request.headers.get("origin"), CORS_ORIGINS),
            )

        return await call_next(request)
