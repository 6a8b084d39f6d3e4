# src/error_handler/api/middleware.py
"""
Fault containment at the request boundary.

ErrorHandlingMiddleware wraps every downstream call in a single try/except:
whatever escapes the route (and the registered exception handlers) is logged and
turned into a response through the injected translator. The exception never
reaches the server, and one failing request has no effect on its siblings.

Ordering:
    app.add_middleware(ErrorHandlingMiddleware)   # contains faults
    app.add_middleware(RequestIDMiddleware)       # added last = outermost, so the
                                                  # 500 also carries X-Request-ID
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from error_handler.exceptions.translator import Translator, internal_error_response, translate
from .responses import build_error_response, log_translated_error

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Args:
        app: the downstream ASGI app.
        translator: exception -> TranslatedError; defaults to `translate`.
        structured: JSON body when True, plain-text message when False.
    """

    def __init__(self, app: ASGIApp, translator: Translator = translate, structured: bool = True):
        super().__init__(app)
        self.translator = translator
        self.structured = structured

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return self.contain(request, exc)

    def contain(self, request: Request, exc: Exception):
        try:
            translated = self.translator(exc)
        except Exception:
            # A custom translator failing must still produce the generic 500.
            logger.exception("Error translator failed for %s %s", request.method, request.url.path)
            translated = internal_error_response()

        log_translated_error(request, exc, translated)
        return build_error_response(translated, self.structured)
