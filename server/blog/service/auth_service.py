import logging
from typing import Optional

from ..repo.postgre.interfaces.user_repository_interface import UserInterface
from ..utils.jwt_helpers import generate_access_token

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repo: UserInterface):
        self.user_repo = user_repo

    def authenticate(self, login: str, password: str, remember_me: bool = False) -> Optional[str]:
        """
        Check credentials and issue a JWT.

        Returns:
            The token, or None for unknown users, wrong passwords and deactivated accounts
        """
        user = self.user_repo.get_user_by_login(login)
        if not user or not user.check_password(password):
            logger.info(f"[AUTH] Authentication failed for '{login}'")
            return None
        if not user.activated:
            logger.info(f"[AUTH] User '{login}' is not activated")
            return None
        return generate_access_token(user.login, remember_me=remember_me)
