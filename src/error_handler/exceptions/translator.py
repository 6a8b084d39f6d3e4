"""
Map any exception to the (status, body) pair written back to the client.

Decision order, first match wins:
    1. ServiceError (raised directly, or wrapped via `raise ... from err`) -> rendered verbatim
    2. classified database error:
         RECORD_NOT_FOUND            -> 404 "Database record not found"
         UNIQUE_CONSTRAINT_VIOLATION -> 409 "Duplicate entry, unique constraint violated"
    3. anything else -> 500 "Internal Server Error"

Everything here is pure: no logging, no I/O, no shared state. Adapters call
`translate()` once per failed request and do their own logging.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Callable, NamedTuple

from .base import ServiceError, conflict_error, not_found_error
from .db_classifier import DatabaseErrorKind, classify_db_error, iter_error_chain

RECORD_NOT_FOUND_MESSAGE = "Database record not found"
DUPLICATE_ENTRY_MESSAGE = "Duplicate entry, unique constraint violated"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"


class TranslatedError(NamedTuple):
    status: int
    body: dict


Translator = Callable[[BaseException], TranslatedError]


def find_service_error(exc: BaseException) -> ServiceError | None:
    """Return the first ServiceError in `exc`'s wrap chain, if any."""
    for linked in iter_error_chain(exc):
        if isinstance(linked, ServiceError):
            return linked
    return None


def db_error_to_service_error(exc: BaseException) -> ServiceError | None:
    """
    Turn a classified database error into a ServiceError.

    Returns None for UNCLASSIFIED errors; the caller decides what those become.
    """
    kind = classify_db_error(exc)
    if kind is DatabaseErrorKind.RECORD_NOT_FOUND:
        return not_found_error(RECORD_NOT_FOUND_MESSAGE)
    if kind is DatabaseErrorKind.UNIQUE_CONSTRAINT_VIOLATION:
        return conflict_error(DUPLICATE_ENTRY_MESSAGE)
    return None


def internal_error_response() -> TranslatedError:
    status = int(HTTPStatus.INTERNAL_SERVER_ERROR)
    return TranslatedError(status, {"error": INTERNAL_SERVER_ERROR_MESSAGE, "status": status})


def translate(exc: BaseException) -> TranslatedError:
    """
    Translate an exception into a status code and a `{"error", "status"}` body.

    Example:
        status, body = translate(conflict_error("Username taken"))
        # status == 409, body == {"error": "Username taken", "status": 409}
    """
    service_error = find_service_error(exc)
    if service_error is None:
        service_error = db_error_to_service_error(exc)

    if service_error is not None:
        return TranslatedError(service_error.status, service_error.to_payload())

    return internal_error_response()


__all__ = [
    "RECORD_NOT_FOUND_MESSAGE",
    "DUPLICATE_ENTRY_MESSAGE",
    "INTERNAL_SERVER_ERROR_MESSAGE",
    "TranslatedError",
    "Translator",
    "find_service_error",
    "db_error_to_service_error",
    "internal_error_response",
    "translate",
]
