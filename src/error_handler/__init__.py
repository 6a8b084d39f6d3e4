"""
error_handler: status-bearing service errors and their translation into HTTP responses.

    from error_handler import translate, not_found_error

    status, body = translate(not_found_error("User not found"))
    # 404, {"error": "User not found", "status": 404}

FastAPI wiring lives in `error_handler.api` (install_error_handling, create_app).
"""

from .exceptions import *  # noqa: F401,F403
from .exceptions import __all__
