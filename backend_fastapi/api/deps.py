"""Proveedores de casos de uso para `Depends` (sobrescribibles en tests)."""

from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from infrastructure import container


def crear_tarea_use_case() -> CrearTareaUseCase:
    return container.get_crear_tarea_use_case()


def editar_tarea_use_case() -> EditarTareaUseCase:
    return container.get_editar_tarea_use_case()


def eliminar_tarea_use_case() -> EliminarTareaUseCase:
    return container.get_eliminar_tarea_use_case()


def listar_tareas_use_case() -> ListarTareasUseCase:
    return container.get_listar_tareas_use_case()


def obtener_tarea_use_case() -> ObtenerTareaUseCase:
    return container.get_obtener_tarea_use_case()
