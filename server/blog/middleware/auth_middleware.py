"""
Authentication middleware for JWT token validation.
"""
from functools import wraps
from inspect import signature

from flask import request, g

from ..core.di_container import DIContainer
from ..repo.postgre.interfaces.user_repository_interface import UserInterface
from ..utils.jwt_helpers import decode_jwt_token
from ..utils.response_helpers import build_error_response


def _build_token_error_response():
    """Helper to build standardized token error response."""
    return build_error_response("Invalid token.", "INVALID_TOKEN", 401)


def _build_no_token_response():
    """Helper to build standardized no token provided response."""
    return build_error_response("Access denied. No token provided.", "NO_TOKEN", 401)


def JWT_required(f):
    """
    Decorator to require a bearer JSON Web Token for API access.

    The authenticated user is stored in ``g.current_user`` and passed to the
    view as ``user`` when the view declares that parameter.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return _build_no_token_response()

        auth_header_parts = auth_header.split(" ")
        if len(auth_header_parts) != 2 or not auth_header_parts[1]:
            return _build_no_token_response()

        payload = decode_jwt_token(auth_header_parts[1])
        if not payload:
            return _build_token_error_response()

        container = DIContainer.get_instance()
        user_repo = container.resolve(UserInterface.__name__)
        user = user_repo.get_user_by_login(payload["sub"])
        if not user or not user.activated:
            return _build_token_error_response()

        g.current_user = user

        if "user" in signature(f).parameters:
            return f(user, *args, **kwargs)

        return f(*args, **kwargs)

    return decorated_function
