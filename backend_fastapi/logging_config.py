import logging.config
import os

FORMATO = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_logging_config(level: str = "INFO") -> dict:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,  # mantiene los loggers de uvicorn
        "formatters": {
            "default": {"format": FORMATO},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            # Logs de la API y del dominio
            "core": {"level": level, "handlers": ["console"], "propagate": False},
            "infrastructure": {"level": level, "handlers": ["console"], "propagate": False},
            "backend_fastapi": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def setup_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level or os.getenv("LOG_LEVEL", "info")))
