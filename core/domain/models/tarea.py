from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class EstadoTarea(Enum):
    PENDIENTE = "PENDIENTE"
    TERMINADO = "TERMINADO"
    CANCELADO = "CANCELADO"


# Atributos descriptivos que se copian tal cual al crear una tarea.
ATRIBUTOS_DESCRIPTIVOS = (
    "tipo",
    "ciudad",
    "nombre_marca",
    "precio",
    "contacto",
    "longitud",
    "latitud",
    "galeria",
)


@dataclass(slots=True)
class Tarea:
    id: str | None = None
    status: EstadoTarea = EstadoTarea.PENDIENTE
    description: str | None = None
    atributos: dict[str, Any] = field(default_factory=dict)
    date: datetime | None = None
