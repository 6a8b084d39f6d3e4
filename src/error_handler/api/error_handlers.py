# src/error_handler/api/error_handlers.py
"""
FastAPI exception handlers that render ServiceError and SQLAlchemy errors.

How to use:
    - Handlers raise error_handler.exceptions.* (NotFoundError, ConflictError, ...)
      or let SQLAlchemy errors bubble up from the persistence layer.
    - register_exception_handlers(app) installs one handler per error family; each
      calls the injected translator and writes the `{"error", "status"}` body.

Everything else (ZeroDivisionError, KeyError, ...) is not handled here: it reaches
ErrorHandlingMiddleware, which contains it as a 500.
"""

from fastapi import FastAPI, Request
from sqlalchemy.exc import SQLAlchemyError

from error_handler.exceptions.base import ServiceError
from error_handler.exceptions.translator import Translator, translate
from .responses import build_error_response, log_translated_error


def make_exception_handler(translator: Translator = translate, structured: bool = True):
    """Return an async FastAPI exception handler bound to `translator`."""

    async def handle_exception(request: Request, exc: Exception):
        translated = translator(exc)
        log_translated_error(request, exc, translated)
        return build_error_response(translated, structured)

    return handle_exception


# Helper to register all handlers on an app (call this from your app factory)
def register_exception_handlers(app: FastAPI, translator: Translator = translate, structured: bool = True) -> None:
    handler = make_exception_handler(translator, structured)
    app.add_exception_handler(ServiceError, handler)
    app.add_exception_handler(SQLAlchemyError, handler)


"""
---------------------------------------------------------
Example
---------------------------------------------------------
```
from fastapi import FastAPI
from error_handler.api import register_exception_handlers
from error_handler.exceptions import conflict_error

app = FastAPI()
register_exception_handlers(app)

@app.post("/users")
async def create_user():
    raise conflict_error("Username taken")
```

The client gets HTTP 409 and body:
```
{"error": "Username taken", "status": 409}
```
"""
