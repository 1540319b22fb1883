"""
Motor del ciclo de vida de una Tarea.

Aplica una actualización parcial (status y/o description) sobre la tarea
almacenada respetando la máquina de estados de `core.domain.transiciones`.

La secuencia leer → mutar → guardar → releer NO es atómica: dos
actualizaciones concurrentes sobre el mismo id pueden pisarse (lost update).
El control de concurrencia le corresponde al almacén.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from core.application.obtener_tarea import obtener_o_fallar
from core.application.reloj import Reloj, ahora_utc, sellar_fecha
from core.domain.errors import IllegalTransition, PersistenceFailure
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import (
    ErrorPersistencia,
    TareaNoEncontrada,
    TareaRepository,
)
from core.domain.transiciones import parsear_estado, transicion_permitida

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditarTareaCommand:
    status: Any = None
    description: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "EditarTareaCommand":
        return cls(status=body.get("status"), description=body.get("description"))


class EditarTareaUseCase:
    def __init__(self, repository: TareaRepository, reloj: Reloj = ahora_utc) -> None:
        self._repository = repository
        self._reloj = reloj

    def execute(self, tarea_id: str, cmd: EditarTareaCommand) -> Tarea:
        """
        Raises:
            ResourceNotFound: si la tarea no existe.
            InvalidStatusValue: si el status no es uno de los tres conocidos.
            IllegalTransition: si la máquina de estados no permite el cambio.
            PersistenceFailure: si falla la escritura o la relectura.
        """
        actual = obtener_o_fallar(self._repository, tarea_id)
        cambios: dict[str, Any] = {}

        if cmd.status is not None:
            nuevo = parsear_estado(cmd.status)
            if not transicion_permitida(actual.status, nuevo):
                logger.warning(
                    f"⛔ Tarea {tarea_id}: transición {actual.status.value} → "
                    f"{nuevo.value} rechazada"
                )
                raise IllegalTransition(actual.status, nuevo)
            cambios["status"] = nuevo

        if cmd.description is not None:
            cambios["description"] = cmd.description

        # Se muta una copia: si el almacén falla no queda ningún efecto visible.
        siguiente = dataclasses.replace(
            actual,
            **cambios,
            date=sellar_fecha(self._reloj, actual.date),
        )

        try:
            self._repository.update(tarea_id, siguiente)
            # update() no retorna la tarea; se relee el estado persistido.
            actualizada = self._repository.get_one(tarea_id)
        except (ErrorPersistencia, TareaNoEncontrada) as e:
            logger.error(f"❌ Can't update Error: {type(e).__name__} : {e}")
            raise PersistenceFailure("update", tarea_id) from e

        logger.info(f"✅ Tarea {tarea_id} actualizada (status={actualizada.status.value})")
        return actualizada
