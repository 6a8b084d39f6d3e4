"""
Status-bearing service errors.

Handlers raise these when a request fails for a reason they understand
(bad input, missing permissions, a missing record, ...). The translator renders
them verbatim: the message becomes the `error` field of the response body and
the status becomes the HTTP status code.

Two ways to build one:
```
    raise ServiceError("Quota exhausted", 429)      # any status, not validated
    raise not_found_error("User not found")         # named constructor
    raise NotFoundError("User not found")           # same thing, as a subclass
```
"""

from http import HTTPStatus


class ServiceError(Exception):
    """
    An intentional failure carrying the HTTP status it should be rendered with.

    - message: human-friendly message (safe to show to clients)
    - status: HTTP status code; the caller is responsible for its validity

    Both values are read-only once the error is constructed.
    """

    def __init__(self, message: str, status: int):
        super().__init__(message)
        super().__setattr__("_message", message)
        super().__setattr__("_status", status)

    def __setattr__(self, name, value):
        if name in ("message", "status", "_message", "_status"):
            raise AttributeError(f"{type(self).__name__}.{name.lstrip('_')} is read-only")
        super().__setattr__(name, value)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> int:
        return self._status

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self._message!r}, status={self._status})"

    def to_payload(self) -> dict:
        """
        Return the JSON-serializable response body for this error:
            {"error": "<message>", "status": <status>}
        """
        return {"error": self._message, "status": self._status}


# Subclasses pin the status; they only take a message.

class _FixedStatusError(ServiceError):
    STATUS: HTTPStatus

    def __init__(self, message: str):
        super().__init__(message, int(self.STATUS))


class BadRequestError(_FixedStatusError):
    STATUS = HTTPStatus.BAD_REQUEST


class UnauthorizedError(_FixedStatusError):
    STATUS = HTTPStatus.UNAUTHORIZED


class ForbiddenError(_FixedStatusError):
    STATUS = HTTPStatus.FORBIDDEN


class NotFoundError(_FixedStatusError):
    STATUS = HTTPStatus.NOT_FOUND


class ConflictError(_FixedStatusError):
    STATUS = HTTPStatus.CONFLICT


class UnprocessableEntityError(_FixedStatusError):
    STATUS = HTTPStatus.UNPROCESSABLE_ENTITY


class TooManyRequestsError(_FixedStatusError):
    STATUS = HTTPStatus.TOO_MANY_REQUESTS


class InternalServerError(_FixedStatusError):
    STATUS = HTTPStatus.INTERNAL_SERVER_ERROR


class ServiceUnavailableError(_FixedStatusError):
    STATUS = HTTPStatus.SERVICE_UNAVAILABLE


# -----------------------
# Constructors
# -----------------------

def new_error(message: str, status: int) -> ServiceError:
    return ServiceError(message, status)


def bad_request_error(message: str) -> ServiceError:
    return BadRequestError(message)


def unauthorized_error(message: str) -> ServiceError:
    return UnauthorizedError(message)


def forbidden_error(message: str) -> ServiceError:
    return ForbiddenError(message)


def not_found_error(message: str) -> ServiceError:
    return NotFoundError(message)


def conflict_error(message: str) -> ServiceError:
    return ConflictError(message)


def unprocessable_entity_error(message: str) -> ServiceError:
    return UnprocessableEntityError(message)


def too_many_requests_error(message: str) -> ServiceError:
    return TooManyRequestsError(message)


def internal_server_error(message: str) -> ServiceError:
    return InternalServerError(message)


def service_unavailable_error(message: str) -> ServiceError:
    return ServiceUnavailableError(message)


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
]
