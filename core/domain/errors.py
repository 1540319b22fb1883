"""
Errores de dominio de la API de tareas.

Todos se recuperan en el borde HTTP y se devuelven con el sobre
`{message, details}`. `code` es estable y coincide con el nombre del error.
"""

from typing import Any


class TareaError(Exception):
    code = "TareaError"

    def __init__(self, message: str, details: str) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "details": self.details}


class MediaNotSupported(TareaError):
    code = "MediaNotSupported"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Media not supported : {value}",
            "This endpoint only support 'application/json' media type, "
            "please verify your `Accept` header",
        )
        self.value = value


class InvalidContentType(TareaError):
    code = "InvalidContentType"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid Content-Type : {value}",
            "This endpoint expected JSON object with attribute `description`",
        )
        self.value = value


class InvalidAttribute(TareaError):
    code = "InvalidAttribute"

    def __init__(self, name: str, value: Any, expected: str = "a non-empty string") -> None:
        super().__init__(
            f'Invalid attribute "{name}"',
            f'The value {value!r} for attribute "{name}" is invalid, it should be {expected}',
        )
        self.name = name
        self.value = value


class InvalidStatusValue(TareaError):
    code = "InvalidStatusValue"

    def __init__(self, value: Any) -> None:
        super().__init__(
            "Invalid Data",
            f"Invalid status {value!r}, only accepted `PENDIENTE`, `TERMINADO`, "
            "`CANCELADO`. It is case sensitive!",
        )
        self.value = value


class IllegalTransition(TareaError):
    code = "IllegalTransition"

    def __init__(self, desde: Any, hacia: Any) -> None:
        desde = getattr(desde, "value", desde)
        hacia = getattr(hacia, "value", hacia)
        super().__init__(
            "Invalid Data",
            f"A Task with status '{desde}' can't be transitioned to status '{hacia}' directly",
        )
        self.desde = desde
        self.hacia = hacia


class ResourceNotFound(TareaError):
    code = "ResourceNotFound"

    def __init__(self, tarea_id: Any) -> None:
        super().__init__(
            f"Can't find object with id : {tarea_id}",
            "This endpoint expected a valid object identifier",
        )
        self.tarea_id = tarea_id


class PersistenceFailure(TareaError):
    code = "PersistenceFailure"

    def __init__(self, operacion: str, tarea_id: Any = None) -> None:
        if tarea_id is None:
            details = f"The tasks store can't {operacion} right now"
        else:
            details = f"A Task with id '{tarea_id}' can't be {_participio(operacion)}"
        super().__init__(f"Can't {operacion}", details)
        self.operacion = operacion
        self.tarea_id = tarea_id


def _participio(operacion: str) -> str:
    return {"update": "updated", "delete": "deleted", "read": "read"}.get(
        operacion, operacion
    )
