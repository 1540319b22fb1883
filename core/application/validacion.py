"""
Validaciones de cabeceras y cuerpo previas a cualquier caso de uso.

Son funciones puras, independientes de FastAPI, para poder probarlas sin
levantar el servidor. Cada una retorna None si el valor es válido o lanza el
TareaError correspondiente.
"""

import json
from typing import Any

from core.domain.errors import (
    InvalidAttribute,
    InvalidContentType,
    MediaNotSupported,
)

JSON_MEDIA_TYPE = "application/json"
CUALQUIER_MEDIA_TYPE = "*/*"


def segmentos(valor: str) -> list[str]:
    """Separa una cabecera por `;` y limpia los espacios de cada segmento."""
    return [segmento.strip() for segmento in valor.split(";")]


def validar_accept(valor: Any) -> None:
    """
    La cabecera Accept es válida si no viene, si es `*/*` o si es
    `application/json`, con o sin parámetros (`;charset=utf-8`, `;q=0.9`).

    Raises:
        MediaNotSupported: con el valor recibido.
    """
    if valor is None:
        return
    if not isinstance(valor, str):
        raise MediaNotSupported(valor)

    media_range = segmentos(valor)[0]
    if media_range not in (JSON_MEDIA_TYPE, CUALQUIER_MEDIA_TYPE):
        raise MediaNotSupported(valor)


def validar_content_type(valor: Any) -> None:
    """
    El Content-Type debe venir y contener `application/json` como uno de sus
    segmentos. Valores nulos, vacíos o que no sean string no son válidos.

    Raises:
        InvalidContentType: con el valor recibido.
    """
    if not valor or not isinstance(valor, str):
        raise InvalidContentType(valor)
    if JSON_MEDIA_TYPE not in segmentos(valor):
        raise InvalidContentType(valor)


def validar_descripcion(body: dict[str, Any]) -> None:
    # Si viene `description` debe ser un string no vacío; null equivale a no enviarla.
    descripcion = body.get("description")
    if descripcion is None:
        return
    if not isinstance(descripcion, str) or not descripcion:
        raise InvalidAttribute("description", descripcion)


def validar_cuerpo(raw: bytes) -> dict[str, Any]:
    """
    Decodifica el cuerpo JSON de la petición. Debe ser un objeto.

    Raises:
        InvalidAttribute: si el cuerpo no es JSON o no es un objeto.
    """
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise InvalidAttribute("body", raw.decode("utf-8", "replace"), "a JSON object") from None
    if not isinstance(body, dict):
        raise InvalidAttribute("body", body, "a JSON object")
    return body
