"""
Traducción de resultados a respuestas HTTP.

- Errores de dominio → JSON `{message, details}` con status 400.
- PersistenceFailure → 400 por compatibilidad; `PERSISTENCE_FAILURE_STATUS=500`
  lo expone como error del servidor.
- OPTIONS y métodos no soportados (405) → cuerpo vacío o texto plano.
"""

import logging
import os

from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from core.domain.errors import PersistenceFailure, TareaError

logger = logging.getLogger(__name__)

CABECERAS_PERMITIDAS = "Accept,Content-Type"


def status_persistencia() -> int:
    valor = os.getenv("PERSISTENCE_FAILURE_STATUS", "400").strip()
    if valor not in {"400", "500"}:
        logger.warning(
            f"⚠️ PERSISTENCE_FAILURE_STATUS={valor!r} no soportado, se usa 400"
        )
        return status.HTTP_400_BAD_REQUEST
    return int(valor)


def status_para(error: TareaError) -> int:
    if isinstance(error, PersistenceFailure):
        return status_persistencia()
    return status.HTTP_400_BAD_REQUEST


async def tarea_error_handler(request: Request, exc: TareaError) -> JSONResponse:
    """Handler registrado en la app para todos los TareaError."""
    codigo = status_para(exc)
    logger.info(
        f"{request.method} {request.url.path} → {codigo} {exc.code}: {exc.message}"
    )
    return JSONResponse(
        status_code=codigo,
        content=exc.to_dict(),
        headers={"X-Error-Code": exc.code},
    )


def opciones(metodos: str) -> Response:
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "Access-Control-Allow-Headers": CABECERAS_PERMITIDAS,
            "Access-Control-Allow-Methods": metodos,
            "Allow": metodos,
        },
    )


def no_soportado(metodo: str, ruta: str, permitidos: str) -> PlainTextResponse:
    return PlainTextResponse(
        f"{metodo} method is not supported on {ruta}",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": permitidos},
    )
