from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from core.domain.models.tarea import Tarea


class TareaSchema(BaseModel):
    """
    Representación JSON de una tarea.

    Los atributos descriptivos (tipo, ciudad, precio, ...) se aplanan al mismo
    nivel que `id`, `status`, `description` y `date`.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    status: str
    description: str | None = None
    date: datetime | None = None

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaSchema":
        return cls(
            **tarea.atributos,
            id=tarea.id,
            status=tarea.status.value,
            description=tarea.description,
            date=tarea.date,
        )


class MensajeSchema(BaseModel):
    message: str
    details: str


def render(tarea: Tarea) -> dict[str, Any]:
    return TareaSchema.from_domain(tarea).model_dump(mode="json")
