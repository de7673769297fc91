import logging

from flask import jsonify

from ...service.auth_service import AuthService
from ...middleware import get_json_or_error
from ...core.di_container import DIContainer
from ...utils.response_helpers import build_error_response

logger = logging.getLogger(__name__)


class AuthController:
    def __init__(self, auth_service: AuthService, blueprint):
        self.auth_service = auth_service
        blueprint.add_url_rule("/authenticate", "authenticate", self.authenticate, methods=["POST"])

    def authenticate(self):
        """
        POST /api/authenticate

        Body: {"username": "admin", "password": "admin", "rememberMe": false}
        Response: {"id_token": "<jwt>"} plus an Authorization header
        """
        data, error = get_json_or_error()
        if error:
            return error

        username = data.get("username")
        password = data.get("password")
        if not username or not password:
            return build_error_response(
                "Please provide all required fields!",
                "MISSING_FIELDS",
                400
            )

        token = self.auth_service.authenticate(username, password, remember_me=bool(data.get("rememberMe")))
        if not token:
            return build_error_response(
                "You have entered an invalid username or password.",
                "INVALID_CREDENTIALS",
                401
            )

        return jsonify({"id_token": token}), 200, {"Authorization": f"Bearer {token}"}


def init_auth_controller(blueprint):
    container = DIContainer.get_instance()
    auth_service = container.resolve(AuthService.__name__)
    return AuthController(auth_service, blueprint)
