from flask import Blueprint


def init_app():
    """Build the authentication blueprint."""
    from .auth_controller import init_auth_controller
    auth_api = Blueprint("auth_api", __name__, url_prefix="/api")
    init_auth_controller(auth_api)
    return auth_api
