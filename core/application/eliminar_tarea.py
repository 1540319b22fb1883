import logging
from dataclasses import dataclass

from core.application.obtener_tarea import obtener_o_fallar
from core.domain.errors import PersistenceFailure
from core.domain.ports.tarea_repository import (
    ErrorPersistencia,
    TareaNoEncontrada,
    TareaRepository,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EliminarTareaCommand:
    id: str


class EliminarTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: EliminarTareaCommand) -> dict[str, str]:
        obtener_o_fallar(self._repository, cmd.id)

        try:
            self._repository.erase(cmd.id)
        except (ErrorPersistencia, TareaNoEncontrada) as e:
            # Se asume que la tarea sigue existiendo.
            logger.error(f"❌ No se pudo eliminar la tarea {cmd.id}: {e}")
            raise PersistenceFailure("delete", cmd.id) from e

        logger.info(f"🗑️ Tarea {cmd.id} eliminada")
        return {
            "message": "Task deleted",
            "details": f"The task with id {cmd.id} was successfully deleted",
        }
