import logging

from core.domain.errors import PersistenceFailure, ResourceNotFound
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import (
    ErrorPersistencia,
    TareaNoEncontrada,
    TareaRepository,
)

logger = logging.getLogger(__name__)


def obtener_o_fallar(repository: TareaRepository, tarea_id: str) -> Tarea:
    """
    Lee una tarea del almacén traduciendo los fallos del colaborador.

    Raises:
        ResourceNotFound: si el id no existe.
        PersistenceFailure: si el almacén falla.
    """
    try:
        return repository.get_one(tarea_id)
    except TareaNoEncontrada:
        raise ResourceNotFound(tarea_id) from None
    except ErrorPersistencia as e:
        logger.error(f"❌ No se pudo leer la tarea {tarea_id}: {e}")
        raise PersistenceFailure("read", tarea_id) from e


class ObtenerTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: str) -> Tarea:
        return obtener_o_fallar(self._repository, tarea_id)
