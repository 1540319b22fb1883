from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response

from backend_fastapi.api.deps import (
    crear_tarea_use_case,
    editar_tarea_use_case,
    eliminar_tarea_use_case,
    listar_tareas_use_case,
    obtener_tarea_use_case,
)
from backend_fastapi.api.respuestas import no_soportado, opciones
from backend_fastapi.api.schemas import MensajeSchema, TareaSchema, render
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.editar_tarea import EditarTareaCommand, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaCommand, EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.application.validacion import (
    validar_accept,
    validar_content_type,
    validar_cuerpo,
    validar_descripcion,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])

METODOS_COLECCION = "OPTIONS,GET,POST"
METODOS_RECURSO = "OPTIONS,GET,DELETE,PUT"


async def _cuerpo_json(request: Request) -> dict[str, Any]:
    body = validar_cuerpo(await request.body())
    validar_descripcion(body)
    return body


@router.options("", summary="Métodos soportados en /tasks")
def opciones_coleccion() -> Response:
    return opciones(METODOS_COLECCION)


@router.get(
    "",
    response_model=list[TareaSchema],
    summary="Listar todas las tareas",
)
async def listar_tareas(
    request: Request,
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[dict[str, Any]]:
    """
    Obtiene una lista de todas las tareas registradas.
    """
    validar_accept(request.headers.get("accept"))
    tareas = await run_in_threadpool(use_case.execute)
    return [render(t) for t in tareas]


@router.post(
    "",
    response_model=TareaSchema,
    summary="Crear una nueva tarea",
)
async def crear_tarea(
    request: Request,
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> dict[str, Any]:
    """
    Crea una nueva tarea en estado PENDIENTE.

    - **description**: Descripción opcional (string no vacío).
    - **tipo**, **ciudad**, **nombre_marca**, **precio**, **contacto**,
      **longitud**, **latitud**, **galeria**: se guardan tal cual.
    """
    validar_content_type(request.headers.get("content-type"))
    body = await _cuerpo_json(request)
    tarea = await run_in_threadpool(use_case.execute, CrearTareaCommand.from_body(body))
    return render(tarea)


@router.put("", include_in_schema=False)
def put_coleccion() -> PlainTextResponse:
    return no_soportado("PUT", "/tasks", METODOS_COLECCION)


@router.delete("", include_in_schema=False)
def delete_coleccion() -> PlainTextResponse:
    return no_soportado("DELETE", "/tasks", METODOS_COLECCION)


@router.options("/{tarea_id}", summary="Métodos soportados en /tasks/{id}")
def opciones_recurso(tarea_id: str) -> Response:
    return opciones(METODOS_RECURSO)


@router.get(
    "/{tarea_id}",
    response_model=TareaSchema,
    summary="Obtener una tarea",
)
async def obtener_tarea(
    tarea_id: str,
    request: Request,
    use_case: ObtenerTareaUseCase = Depends(obtener_tarea_use_case),
) -> dict[str, Any]:
    validar_accept(request.headers.get("accept"))
    tarea = await run_in_threadpool(use_case.execute, tarea_id)
    return render(tarea)


@router.put(
    "/{tarea_id}",
    response_model=TareaSchema,
    summary="Editar una tarea existente",
)
async def editar_tarea(
    tarea_id: str,
    request: Request,
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> dict[str, Any]:
    """
    Actualiza el status y/o la descripción de una tarea.

    - **status**: `PENDIENTE`, `TERMINADO` o `CANCELADO`. Una tarea TERMINADO
      no puede pasar a CANCELADO ni viceversa.
    - **description**: Nueva descripción.
    """
    validar_content_type(request.headers.get("content-type"))
    validar_accept(request.headers.get("accept"))
    body = await _cuerpo_json(request)
    tarea = await run_in_threadpool(
        use_case.execute, tarea_id, EditarTareaCommand.from_body(body)
    )
    return render(tarea)


@router.delete(
    "/{tarea_id}",
    response_model=MensajeSchema,
    summary="Eliminar una tarea",
)
async def eliminar_tarea(
    tarea_id: str,
    use_case: EliminarTareaUseCase = Depends(eliminar_tarea_use_case),
) -> dict[str, str]:
    """
    Elimina una tarea del sistema.
    """
    return await run_in_threadpool(use_case.execute, EliminarTareaCommand(id=tarea_id))


@router.post("/{tarea_id}", include_in_schema=False)
def post_recurso(tarea_id: str) -> PlainTextResponse:
    return no_soportado("POST", "/tasks/{id}", METODOS_RECURSO)
