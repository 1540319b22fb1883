from abc import ABC, abstractmethod

from core.domain.models.tarea import Tarea


class TareaNoEncontrada(Exception):
    """El identificador no corresponde a ninguna tarea almacenada."""

    def __init__(self, tarea_id: str) -> None:
        super().__init__(f"Tarea con id {tarea_id} no encontrada")
        self.tarea_id = tarea_id


class ErrorPersistencia(Exception):
    """Fallo del almacén (conexión, escritura, lectura)."""


class TareaRepository(ABC):
    @abstractmethod
    def get_all(self) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def get_one(self, tarea_id: str) -> Tarea:
        raise NotImplementedError

    @abstractmethod
    def create(self, tarea: Tarea) -> Tarea:
        raise NotImplementedError

    @abstractmethod
    def update(self, tarea_id: str, tarea: Tarea) -> None:
        raise NotImplementedError

    @abstractmethod
    def erase(self, tarea_id: str) -> None:
        raise NotImplementedError
