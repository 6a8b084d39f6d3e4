# src/error_handler/api/app.py
"""
Wiring for a FastAPI application.

install_error_handling() is the single place the translator is injected into the
framework: exception handlers for ServiceError / SQLAlchemy errors, the
fault-containment middleware, and (optionally) the request-id middleware.
"""

from fastapi import FastAPI

from error_handler.config.settings import Settings, get_settings
from error_handler.core.logging import RequestIDMiddleware, setup_logging
from error_handler.exceptions.translator import Translator, translate
from .error_handlers import register_exception_handlers
from .middleware import ErrorHandlingMiddleware


def install_error_handling(app: FastAPI, settings: Settings | None = None, translator: Translator = translate) -> FastAPI:
    settings = settings or get_settings()
    structured = settings.ERROR_RESPONSE_FORMAT == "json"

    register_exception_handlers(app, translator=translator, structured=structured)
    app.add_middleware(ErrorHandlingMiddleware, translator=translator, structured=structured)
    if settings.EXPOSE_REQUEST_ID:
        app.add_middleware(RequestIDMiddleware)
    return app


def create_app(settings: Settings | None = None, *, configure_logging: bool = True, **fastapi_kwargs) -> FastAPI:
    """
    App factory: logging from settings, then a FastAPI instance with error handling installed.
    Routers are included by the caller.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    app = FastAPI(**fastapi_kwargs)
    return install_error_handling(app, settings)
