# src/error_handler/core/logging/builder.py
"""
Logging builder: assemble a dictConfig mapping from Settings and apply it.

    setup_logging(get_settings())

Handlers:
  - console: always
  - file + error_file: when LOG_TO_STDOUT is False and LOG_DIR is set
  - error_console: otherwise (ERROR and above, JSON)
Loggers: root, `error_handler` (the adapters log here), uvicorn.error, uvicorn.access.
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

# Settings type only; do not call get_settings() here (import-time side effects).
from error_handler.config.settings import Settings

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """Build the dictConfig mapping for `settings`. Pure; nothing is applied."""
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "fmt": TEXT_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": getattr(settings, "SERVICE_NAME", "error-handler"),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "error_handler": {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Apply make_dict_config(settings).

    Creates LOG_DIR first when logging to files, and adds a RequestIdFilter to the
    root logger so records logged straight on root also carry `request_id`.
    """
    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger().addFilter(RequestIdFilter())
