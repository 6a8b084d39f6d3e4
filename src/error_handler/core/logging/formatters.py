# src/error_handler/core/logging/formatters.py
"""
Formatters used by the dictConfig built in builder.py.

  - JsonFormatter: one JSON object per line, for log collectors. Carries the
    observability fields (service, env, version, request_id) plus any `extra=`
    attributes, e.g. the `status` / `error_type` fields the error adapters attach.
  - ColorFormatter: compact ANSI-colored lines for a developer terminal.
"""

import json
import logging
from typing import Any
from logging import LogRecord
from error_handler.utils.logging import get_project_version

PROJECT_VERSION = get_project_version()

# Attributes every LogRecord carries; anything else on the record came from `extra=`.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "request_id"}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name included on every line
      - service: logical service name included on every line
      - datefmt: passed through to logging.Formatter.formatTime

    `format()` never raises: extras that are not JSON-serializable are stringified.
    """

    def __init__(self, *, env: str | None = None, service: str = "error-handler", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_ATTRS or key in log_record or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Human-friendly formatter: TIMESTAMP | LEVEL | LOGGER | REQUEST_ID | MESSAGE,
    with the level colorized and the traceback appended when present.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red
        "RESET": "\033[0m",
    }

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        reset = self.COLOR_CODES["RESET"]

        line = (
            f"{self.formatTime(record, self.datefmt)} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<30} | "
            f"{getattr(record, 'request_id', '-'):<10} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            line = line + "\n" + self.formatException(record.exc_info)

        return line


__all__ = ["JsonFormatter", "ColorFormatter", "PROJECT_VERSION"]
