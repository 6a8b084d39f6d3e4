# error_handler/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py              # ServiceError and its named constructors
# │   ├── db_classifier.py     # driver-specific DB errors -> DatabaseErrorKind
# │   └── translator.py        # any exception -> (status, {"error", "status"})

from .base import (
    ServiceError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    TooManyRequestsError,
    InternalServerError,
    ServiceUnavailableError,
    new_error,
    bad_request_error,
    unauthorized_error,
    forbidden_error,
    not_found_error,
    conflict_error,
    unprocessable_entity_error,
    too_many_requests_error,
    internal_server_error,
    service_unavailable_error,
)
from .db_classifier import DatabaseErrorKind, classify_db_error, is_unique_constraint_violation
from .translator import TranslatedError, Translator, db_error_to_service_error, translate

__all__ = [
    "ServiceError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "TooManyRequestsError",
    "InternalServerError",
    "ServiceUnavailableError",
    "new_error",
    "bad_request_error",
    "unauthorized_error",
    "forbidden_error",
    "not_found_error",
    "conflict_error",
    "unprocessable_entity_error",
    "too_many_requests_error",
    "internal_server_error",
    "service_unavailable_error",
    "DatabaseErrorKind",
    "classify_db_error",
    "is_unique_constraint_violation",
    "TranslatedError",
    "Translator",
    "db_error_to_service_error",
    "translate",
]
