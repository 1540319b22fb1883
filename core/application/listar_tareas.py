import logging

from core.domain.errors import PersistenceFailure
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import ErrorPersistencia, TareaRepository

logger = logging.getLogger(__name__)


class ListarTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Tarea]:
        try:
            return self._repository.get_all()
        except ErrorPersistencia as e:
            logger.error(f"❌ No se pudo listar las tareas: {e}")
            raise PersistenceFailure("read") from e
