"""
Máquina de estados de una Tarea.

    PENDIENTE ──► TERMINADO
        │
        └──────► CANCELADO

PENDIENTE es el estado inicial. TERMINADO y CANCELADO son terminales: una
tarea terminal solo puede quedarse donde está.
"""

from typing import Any

from core.domain.errors import InvalidStatusValue
from core.domain.models.tarea import EstadoTarea

TRANSICIONES: dict[EstadoTarea, frozenset[EstadoTarea]] = {
    EstadoTarea.PENDIENTE: frozenset(
        {EstadoTarea.PENDIENTE, EstadoTarea.TERMINADO, EstadoTarea.CANCELADO}
    ),
    EstadoTarea.TERMINADO: frozenset({EstadoTarea.TERMINADO}),
    EstadoTarea.CANCELADO: frozenset({EstadoTarea.CANCELADO}),
}

ESTADOS_TERMINALES = frozenset({EstadoTarea.TERMINADO, EstadoTarea.CANCELADO})


def transicion_permitida(desde: EstadoTarea, hacia: EstadoTarea) -> bool:
    """¿Puede una tarea en estado `desde` pasar a `hacia`?"""
    return hacia in TRANSICIONES[desde]


def es_terminal(estado: EstadoTarea) -> bool:
    return estado in ESTADOS_TERMINALES


def parsear_estado(valor: Any) -> EstadoTarea:
    """
    Convierte el valor recibido en el body a un EstadoTarea.

    La comparación es exacta (sensible a mayúsculas).

    Raises:
        InvalidStatusValue: si el valor no es uno de los estados conocidos.
    """
    if not isinstance(valor, str):
        raise InvalidStatusValue(valor)
    try:
        return EstadoTarea(valor)
    except ValueError:
        raise InvalidStatusValue(valor) from None
