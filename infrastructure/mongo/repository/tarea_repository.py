from typing import Any
from uuid import uuid4

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import (
    ErrorPersistencia,
    TareaNoEncontrada,
    TareaRepository,
)
from infrastructure.mongo.models.tarea import TareaMongo
from infrastructure.mongo.session.client import get_db


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).

    Los errores de pymongo se traducen a ErrorPersistencia.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks

    def get_all(self) -> list[Tarea]:
        """
        Lista todas las tareas.

        Retorna:
            list[Tarea]: Lista de todas las tareas.
        """
        try:
            docs = list(self.collection.find())
        except PyMongoError as e:
            raise ErrorPersistencia(str(e)) from e
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def get_one(self, tarea_id: str) -> Tarea:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            tarea_id (str): El ID de la tarea.

        Raises:
            TareaNoEncontrada: si no existe un documento con ese ID.
        """
        try:
            doc = self.collection.find_one({"_id": tarea_id})
        except PyMongoError as e:
            raise ErrorPersistencia(str(e)) from e
        if not doc:
            raise TareaNoEncontrada(tarea_id)
        return TareaMongo(**doc).to_domain()

    def create(self, tarea: Tarea) -> Tarea:
        """
        Inserta una tarea nueva con un ID generado.

        Retorna:
            Tarea: La tarea tal como quedó almacenada.
        """
        documento = TareaMongo.from_domain(uuid4().hex, tarea)
        try:
            self.collection.insert_one(documento.model_dump(by_alias=True))
        except PyMongoError as e:
            raise ErrorPersistencia(str(e)) from e
        return documento.to_domain()

    def update(self, tarea_id: str, tarea: Tarea) -> None:
        """
        Reemplaza los campos mutables de la tarea. No retorna el documento.

        Argumentos:
            tarea_id (str): El ID de la tarea.
            tarea (Tarea): El nuevo estado de la tarea.
        """
        cambios = TareaMongo.from_domain(tarea_id, tarea).model_dump(by_alias=True)
        cambios.pop("_id")
        try:
            result = self.collection.update_one({"_id": tarea_id}, {"$set": cambios})
        except PyMongoError as e:
            raise ErrorPersistencia(str(e)) from e
        if result.matched_count == 0:
            raise TareaNoEncontrada(tarea_id)

    def erase(self, tarea_id: str) -> None:
        """
        Elimina una tarea por su ID.

        Argumentos:
            tarea_id (str): El ID de la tarea a eliminar.
        """
        try:
            result = self.collection.delete_one({"_id": tarea_id})
        except PyMongoError as e:
            raise ErrorPersistencia(str(e)) from e
        if result.deleted_count == 0:
            raise TareaNoEncontrada(tarea_id)
