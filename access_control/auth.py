# access_control/auth.py
from functools import wraps
from typing import Callable, Any

from flask import current_app, jsonify, request


def authenticate_admin(username: str, password: str) -> bool:
    """Sprawdza poświadczenia admina względem konfiguracji aplikacji."""
    return (
        username == current_app.config.get("ADMIN_USERNAME")
        and password == current_app.config.get("ADMIN_PASSWORD")
    )


def is_admin_request() -> bool:
    auth = request.authorization
    if auth is None or auth.username is None:
        return False
    return authenticate_admin(auth.username, auth.password or "")


def admin_required(view_func: Callable) -> Callable:
    """Dekorator wymagający HTTP Basic admina (endpointy podglądu ustawień)."""

    @wraps(view_func)
    def wrapper(*args: Any, **kwargs: Any):
        if not is_admin_request():
            current_app.logger.warning("Unauthorized access to %s", request.path)
            resp = jsonify({"error": "Authentication required"})
            resp.status_code = 401
            resp.headers["WWW-Authenticate"] = 'Basic realm="shipping-admin"'
            return resp
        return view_func(*args, **kwargs)

    return wrapper
