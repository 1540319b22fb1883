from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: str = Field(alias="_id")
    status: str = EstadoTarea.PENDIENTE.value
    description: str | None = None
    atributos: dict[str, Any] = Field(default_factory=dict)
    date: datetime | None = None

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Tarea:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        pymongo entrega fechas naive en UTC; se les agrega la zona horaria.
        """
        fecha = self.date
        if fecha is not None and fecha.tzinfo is None:
            fecha = fecha.replace(tzinfo=timezone.utc)
        return Tarea(
            id=self.id,
            status=EstadoTarea(self.status),
            description=self.description,
            atributos=dict(self.atributos),
            date=fecha,
        )

    @classmethod
    def from_domain(cls, tarea_id: str, tarea: Tarea) -> "TareaMongo":
        """
        Crea el documento a partir de una entidad de dominio.

        Argumentos:
            tarea_id (str): El id con el que se guarda el documento.
            tarea (Tarea): La entidad de dominio.
        """
        return cls(
            id=tarea_id,
            status=tarea.status.value,
            description=tarea.description,
            atributos=tarea.atributos,
            date=tarea.date,
        )
