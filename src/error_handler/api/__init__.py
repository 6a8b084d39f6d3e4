from .app import create_app, install_error_handling
from .error_handlers import make_exception_handler, register_exception_handlers
from .middleware import ErrorHandlingMiddleware
from .responses import build_error_response, log_translated_error

__all__ = [
    "create_app",
    "install_error_handling",
    "make_exception_handler",
    "register_exception_handlers",
    "ErrorHandlingMiddleware",
    "build_error_response",
    "log_translated_error",
]
