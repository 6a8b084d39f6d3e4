# src/error_handler/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

Uses the incoming `X-Request-ID` header when it looks sane, otherwise a fresh
UUID4; stores it in the contextvar read by RequestIdFilter; echoes it on the
response. Register it outermost (add it last) so error responses written by
ErrorHandlingMiddleware also carry the header.
"""

import re
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"

# Printable, no whitespace, bounded: keeps header values from injecting into log lines.
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:\-]{1,128}")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and _VALID_REQUEST_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
