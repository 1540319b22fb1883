from dotenv import load_dotenv

# Load environment variables from .env file (antes de crear las sesiones de BDD)
load_dotenv()

from fastapi import FastAPI, Request  # noqa: E402

from backend_fastapi.api.respuestas import tarea_error_handler  # noqa: E402
from backend_fastapi.api.routes.tareas import router as tareas_router  # noqa: E402
from backend_fastapi.logging_config import setup_logging  # noqa: E402
from core.domain.errors import TareaError  # noqa: E402

setup_logging()

app = FastAPI(title="Tasks API")


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    # Todas las respuestas, incluidos errores y OPTIONS.
    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


app.add_exception_handler(TareaError, tarea_error_handler)
app.include_router(tareas_router)
