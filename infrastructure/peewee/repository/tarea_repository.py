import json
import logging
from datetime import datetime, timezone
from uuid import uuid4

from peewee import PeeweeException

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import (
    ErrorPersistencia,
    TareaNoEncontrada,
    TareaRepository,
)
from infrastructure.peewee.model.models import TareaModel
from infrastructure.peewee.session.db import db

logger = logging.getLogger(__name__)


def _a_naive_utc(fecha: datetime | None) -> datetime | None:
    if fecha is None or fecha.tzinfo is None:
        return fecha
    return fecha.astimezone(timezone.utc).replace(tzinfo=None)


def _a_domain(model: TareaModel) -> Tarea:
    fecha = model.date
    return Tarea(
        id=model.id,
        status=EstadoTarea(model.status),
        description=model.description,
        atributos=json.loads(model.atributos or "{}"),
        date=fecha.replace(tzinfo=timezone.utc) if fecha is not None else None,
    )


class PeeweeTareaRepository(TareaRepository):
    def __init__(self):
        # Sin migraciones: la tabla se crea al instanciar el repositorio.
        db.connect(reuse_if_open=True)
        db.create_tables([TareaModel], safe=True)

    def get_all(self) -> list[Tarea]:
        try:
            return [_a_domain(t) for t in TareaModel.select()]
        except PeeweeException as e:
            raise ErrorPersistencia(str(e)) from e

    def get_one(self, tarea_id: str) -> Tarea:
        try:
            return _a_domain(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            raise TareaNoEncontrada(tarea_id) from None
        except PeeweeException as e:
            raise ErrorPersistencia(str(e)) from e

    def create(self, tarea: Tarea) -> Tarea:
        tarea_id = uuid4().hex
        try:
            with db.atomic():
                model = TareaModel.create(
                    id=tarea_id,
                    description=tarea.description,
                    atributos=json.dumps(tarea.atributos),
                    date=_a_naive_utc(tarea.date),
                )
        except PeeweeException as e:
            raise ErrorPersistencia(str(e)) from e
        logger.debug(f"✓ Tarea {tarea_id} insertada en {TareaModel._meta.table_name}")
        return _a_domain(model)

    def update(self, tarea_id: str, tarea: Tarea) -> None:
        try:
            with db.atomic():
                filas = (
                    TareaModel.update(
                        status=tarea.status.value,
                        description=tarea.description,
                        atributos=json.dumps(tarea.atributos),
                        date=_a_naive_utc(tarea.date),
                    )
                    .where(TareaModel.id == tarea_id)
                    .execute()
                )
        except PeeweeException as e:
            raise ErrorPersistencia(str(e)) from e
        if filas == 0:
            raise TareaNoEncontrada(tarea_id)

    def erase(self, tarea_id: str) -> None:
        try:
            filas = TareaModel.delete().where(TareaModel.id == tarea_id).execute()
        except PeeweeException as e:
            raise ErrorPersistencia(str(e)) from e
        if filas == 0:
            raise TareaNoEncontrada(tarea_id)
