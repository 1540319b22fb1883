import logging
from dataclasses import dataclass, field
from typing import Any

from core.application.reloj import Reloj, ahora_utc, sellar_fecha
from core.domain.errors import PersistenceFailure
from core.domain.models.tarea import ATRIBUTOS_DESCRIPTIVOS, Tarea
from core.domain.ports.tarea_repository import ErrorPersistencia, TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    description: str | None = None
    atributos: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "CrearTareaCommand":
        # `status` e `id` del cliente se ignoran: los asigna el almacén.
        return cls(
            description=body.get("description"),
            atributos={k: body[k] for k in ATRIBUTOS_DESCRIPTIVOS if k in body},
        )


class CrearTareaUseCase:
    def __init__(self, repository: TareaRepository, reloj: Reloj = ahora_utc) -> None:
        self._repository = repository
        self._reloj = reloj

    def execute(self, cmd: CrearTareaCommand) -> Tarea:
        tarea = Tarea(
            description=cmd.description,
            atributos=dict(cmd.atributos),
            date=sellar_fecha(self._reloj),
        )
        try:
            creada = self._repository.create(tarea)
        except ErrorPersistencia as e:
            logger.error(f"❌ No se pudo crear la tarea: {e}")
            raise PersistenceFailure("create") from e

        logger.info(f"✅ Tarea {creada.id} creada")
        return creada
