"""Logging config handed to uvicorn, plus helpers for what we log."""
from sqlalchemy.engine import make_url


def build_logging_config(log_level: str) -> dict:
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "collablite": {"level": level},
            # strawberry logs resolver errors on this logger
            "strawberry.execution": {"level": level},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }


def mask_dsn(dsn: str) -> str:
    """Hide the password part of a database url."""
    return make_url(dsn).render_as_string(hide_password=True)
