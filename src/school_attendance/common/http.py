from __future__ import annotations

from functools import wraps
from typing import Any

from flask import jsonify, request

from ..app_logger import get_logger
from ..core.exceptions import DomainError

logger = get_logger(__name__)


def json_body() -> dict[str, Any]:
    """Request JSON object, or an empty dict for missing/non-object bodies."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int):
    return jsonify({"message": message}), status


def json_endpoint(action: str):
    """Translate domain errors into JSON responses.

    Unexpected exceptions are logged with traceback and answered with a
    generic 500 so no internal detail leaks to the client.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                if e.status_code >= 500:
                    logger.error("Error %s: %s", action, e)
                return error_response(str(e), e.status_code)
            except Exception:
                logger.exception("Error %s", action)
                return error_response("Internal server error", 500)

        return wrapper

    return decorator
