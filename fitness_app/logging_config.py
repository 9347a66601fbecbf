"""Central logging configuration for the workout tracker."""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from fitness_app.config import get_settings

_configured = False


def _default_config(level: str, log_dir: Path | None = None) -> dict:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handlers: dict = {
        # stderr keeps log lines out of the menu output on stdout
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
            "stream": "ext://sys.stderr",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "fitness_app.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": level,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
            },
        },
        "handlers": handlers,
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def configure_logging(level: str | None = None) -> None:
    """Configure application logging once per process.

    ``level`` overrides the configured log level (used by ``--log-level``).
    """

    global _configured
    if _configured:
        return

    log_dir: Path | None = None
    try:
        settings = get_settings()
        if settings.log_to_file:
            log_dir = settings.log_dir
        configured_level = settings.log_level
    except ValidationError:
        # Fall back to defaults when the environment holds invalid settings.
        configured_level = "WARNING"

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(_default_config((level or configured_level).upper(), log_dir))
    _configured = True
