# src/error_handler/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter stamps `record.request_id` from a contextvar so every line
  logged while a request is being handled (including the error adapters'
  "fault contained" lines) can be correlated with the `X-Request-ID` the client
  received.
- RedactFilter masks sensitive `extra=` attributes before a record reaches a handler.

The contextvar is set by RequestIDMiddleware. `contextvars` (not threading.local)
keeps concurrent requests on the same event loop isolated from one another.
"""

import logging
from logging import LogRecord
import contextvars

REQUEST_ID_SENTINEL = "-"

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    """
    Set the request id for the current context.

    Returns:
        token: pass it to reset_request_id(token) once the request is done.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence: an explicit `extra={"request_id": ...}`, then the contextvar,
    then the "-" sentinel (so `%(request_id)s` never KeyErrors). Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or REQUEST_ID_SENTINEL
        )
        return True


class RedactFilter(logging.Filter):
    """Mask record attributes whose name looks sensitive (passwords, tokens, auth headers)."""

    SENSITIVE = {
        "password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
        "cookie",
        "set_cookie",
        "api_key",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True


__all__ = [
    "REQUEST_ID_SENTINEL",
    "set_request_id",
    "reset_request_id",
    "get_request_id",
    "RequestIdFilter",
    "RedactFilter",
]
