"""
Response building and logging shared by the exception handlers and the
fault-containment middleware, so both paths emit the same wire shape:

    HTTP <status>
    {"error": "<message>", "status": <status>}       (structured, application/json)
    <message>                                         (degraded, text/plain)
"""

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from error_handler.exceptions.translator import TranslatedError, find_service_error

logger = logging.getLogger(__name__)


def build_error_response(translated: TranslatedError, structured: bool = True) -> Response:
    status, body = translated
    if structured:
        return JSONResponse(status_code=status, content=body)
    return PlainTextResponse(body["error"], status_code=status)


def log_translated_error(request: Request, exc: BaseException, translated: TranslatedError) -> None:
    """
    Record a translated error before its response is written.

    - ServiceError: INFO for 4xx, WARNING for 5xx (intentional, no traceback)
    - other errors translated to a non-5xx status (classified DB errors): INFO
    - anything rendered as a generic 5xx: ERROR with traceback
    """
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status": translated.status,
        "error_type": type(exc).__name__,
    }

    if find_service_error(exc) is not None:
        level = logging.WARNING if translated.status >= 500 else logging.INFO
        logger.log(level, "ServiceError for %s %s: %s", request.method, request.url.path, translated.body["error"], extra=extra)
        return

    if translated.status < 500:
        logger.info("Classified error for %s %s mapped to %d", request.method, request.url.path, translated.status, extra=extra)
        return

    logger.error(
        "Unhandled exception for %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
        extra=extra,
    )
