"""
Tests de la API HTTP /tasks con un almacén en memoria.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase

from fakes import FailingTareaRepository

JSON = {"Content-Type": "application/json"}


@pytest.fixture
def repo():
    return FailingTareaRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[deps.crear_tarea_use_case] = lambda: CrearTareaUseCase(repo)
    app.dependency_overrides[deps.editar_tarea_use_case] = lambda: EditarTareaUseCase(repo)
    app.dependency_overrides[deps.eliminar_tarea_use_case] = lambda: EliminarTareaUseCase(repo)
    app.dependency_overrides[deps.listar_tareas_use_case] = lambda: ListarTareasUseCase(repo)
    app.dependency_overrides[deps.obtener_tarea_use_case] = lambda: ObtenerTareaUseCase(repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


def crear(client, **body):
    response = client.post("/tasks", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def error_code(response):
    return response.headers["X-Error-Code"]


def fecha(valor):
    return datetime.fromisoformat(valor.replace("Z", "+00:00"))


# ── Escenarios completos ─────────────────────────────────────────────────────


def test_escenario_terminar_y_luego_cancelar(client):
    tarea = crear(client, description="buy milk")
    assert tarea["status"] == "PENDIENTE"

    terminada = client.put(f"/tasks/{tarea['id']}", json={"status": "TERMINADO"})
    assert terminada.status_code == 200
    assert terminada.json()["status"] == "TERMINADO"

    cancelada = client.put(f"/tasks/{tarea['id']}", json={"status": "CANCELADO"})
    assert cancelada.status_code == 400
    assert error_code(cancelada) == "IllegalTransition"
    assert cancelada.json() == {
        "message": "Invalid Data",
        "details": "A Task with status 'TERMINADO' can't be transitioned to status 'CANCELADO' directly",
    }


def test_put_sobre_id_inexistente(client):
    for body in ({"status": "TERMINADO"}, {"description": "x"}, {"status": "nope"}, {}):
        response = client.put("/tasks/doesnotexist", json=body)

        assert response.status_code == 400
        assert error_code(response) == "ResourceNotFound"
        assert response.json()["message"] == "Can't find object with id : doesnotexist"


def test_crear_y_obtener_conserva_los_campos(client):
    body = {
        "description": "pintar la casa",
        "tipo": "hogar",
        "ciudad": "Quito",
        "nombre_marca": "ACME",
        "precio": 120.5,
        "contacto": "ana@example.com",
        "longitud": "-78.5",
        "latitud": "-0.2",
        "galeria": "https://example.com/1.png",
    }

    creada = crear(client, **body)
    obtenida = client.get(f"/tasks/{creada['id']}")

    assert obtenida.status_code == 200
    assert obtenida.json() == creada
    for campo, valor in body.items():
        assert creada[campo] == valor
    assert creada["date"]


def test_crear_ignora_status_e_id(client):
    tarea = crear(client, description="x", status="CANCELADO", id="mio")

    assert tarea["status"] == "PENDIENTE"
    assert tarea["id"] != "mio"


def test_crear_sin_description(client):
    tarea = crear(client, ciudad="Lima")

    assert tarea["status"] == "PENDIENTE"
    assert tarea["description"] is None


def test_listar(client):
    a = crear(client, description="a")
    b = crear(client, description="b")

    response = client.get("/tasks")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert {t["id"] for t in response.json()} == {a["id"], b["id"]}


def test_actualizar_descripcion_avanza_la_fecha(client):
    tarea = crear(client, description="a")

    response = client.put(f"/tasks/{tarea['id']}", json={"description": "b"})

    assert response.status_code == 200
    assert response.json()["description"] == "b"
    assert response.json()["status"] == "PENDIENTE"
    assert fecha(response.json()["date"]) > fecha(tarea["date"])


def test_status_invalido(client):
    tarea = crear(client)

    response = client.put(f"/tasks/{tarea['id']}", json={"status": "terminado"})

    assert response.status_code == 400
    assert error_code(response) == "InvalidStatusValue"


def test_eliminar(client):
    tarea = crear(client)

    response = client.delete(f"/tasks/{tarea['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Task deleted",
        "details": f"The task with id {tarea['id']} was successfully deleted",
    }
    assert error_code(client.get(f"/tasks/{tarea['id']}")) == "ResourceNotFound"


def test_eliminar_inexistente(client):
    response = client.delete("/tasks/doesnotexist")

    assert response.status_code == 400
    assert error_code(response) == "ResourceNotFound"


# ── Cabeceras ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("accept", ["application/json;charset=utf-8", "*/*", "application/json"])
def test_accept_aceptado(client, accept):
    assert client.get("/tasks", headers={"Accept": accept}).status_code == 200


def test_accept_rechazado(client):
    tarea = crear(client)

    for response in (
        client.get("/tasks", headers={"Accept": "text/html"}),
        client.get(f"/tasks/{tarea['id']}", headers={"Accept": "text/html"}),
        client.put(
            f"/tasks/{tarea['id']}",
            json={"status": "TERMINADO"},
            headers={"Accept": "text/html"},
        ),
    ):
        assert response.status_code == 400
        assert error_code(response) == "MediaNotSupported"
        assert response.json()["message"] == "Media not supported : text/html"

    assert client.get(f"/tasks/{tarea['id']}").json()["status"] == "PENDIENTE"


@pytest.mark.parametrize("headers", [{}, {"Content-Type": "text/plain"}])
def test_content_type_rechazado(client, headers):
    tarea = crear(client)

    for response in (
        client.post("/tasks", content=b'{"description": "x"}', headers=headers),
        client.put(f"/tasks/{tarea['id']}", content=b'{"status": "TERMINADO"}', headers=headers),
    ):
        assert response.status_code == 400
        assert error_code(response) == "InvalidContentType"


def test_content_type_se_valida_antes_que_accept(client):
    tarea = crear(client)

    response = client.put(
        f"/tasks/{tarea['id']}",
        content=b"{}",
        headers={"Content-Type": "text/plain", "Accept": "text/html"},
    )

    assert error_code(response) == "InvalidContentType"


def test_content_type_con_parametros(client):
    response = client.post(
        "/tasks",
        content=b'{"description": "x"}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )

    assert response.status_code == 200


@pytest.mark.parametrize("description", [123, False, ["a"], ""])
def test_description_invalida(client, description):
    tarea = crear(client, description="ok")

    for response in (
        client.post("/tasks", json={"description": description}),
        client.put(f"/tasks/{tarea['id']}", json={"description": description}),
    ):
        assert response.status_code == 400
        assert error_code(response) == "InvalidAttribute"
        assert repr(description) in response.json()["details"]


def test_cuerpo_que_no_es_objeto(client):
    response = client.post("/tasks", content=b"[1, 2]", headers=JSON)

    assert response.status_code == 400
    assert error_code(response) == "InvalidAttribute"


# ── Fallos del almacén ───────────────────────────────────────────────────────


def test_fallo_de_persistencia_es_400_por_defecto(client, repo):
    tarea = crear(client)
    repo.falla_en.add("update")

    response = client.put(f"/tasks/{tarea['id']}", json={"status": "TERMINADO"})

    assert response.status_code == 400
    assert error_code(response) == "PersistenceFailure"
    assert response.json()["message"] == "Can't update"


def test_fallo_de_persistencia_como_500(client, repo, monkeypatch):
    monkeypatch.setenv("PERSISTENCE_FAILURE_STATUS", "500")
    tarea = crear(client)
    repo.falla_en.add("erase")

    response = client.delete(f"/tasks/{tarea['id']}")

    assert response.status_code == 500
    assert error_code(response) == "PersistenceFailure"
    assert client.get(f"/tasks/{tarea['id']}").status_code == 200


# ── Métodos y CORS ───────────────────────────────────────────────────────────


def test_options_coleccion(client):
    response = client.options("/tasks")

    assert response.status_code == 200
    assert response.headers["Allow"] == "OPTIONS,GET,POST"
    assert response.headers["Access-Control-Allow-Headers"] == "Accept,Content-Type"
    assert response.content == b""


def test_options_recurso(client):
    response = client.options("/tasks/cualquiera")

    assert response.status_code == 200
    assert response.headers["Allow"] == "OPTIONS,GET,DELETE,PUT"
    assert response.content == b""


@pytest.mark.parametrize(
    "metodo,ruta,texto",
    [
        ("PUT", "/tasks", "PUT method is not supported on /tasks"),
        ("DELETE", "/tasks", "DELETE method is not supported on /tasks"),
        ("POST", "/tasks/abc", "POST method is not supported on /tasks/{id}"),
    ],
)
def test_metodos_no_soportados(client, metodo, ruta, texto):
    response = client.request(metodo, ruta)

    assert response.status_code == 405
    assert response.text == texto


def test_todas_las_respuestas_permiten_cualquier_origen(client):
    tarea = crear(client)

    for response in (
        client.get("/tasks"),
        client.get("/tasks/doesnotexist"),
        client.options("/tasks"),
        client.put("/tasks"),
        client.delete(f"/tasks/{tarea['id']}"),
    ):
        assert response.headers["Access-Control-Allow-Origin"] == "*"
