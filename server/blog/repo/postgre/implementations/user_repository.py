import logging
from typing import Optional

from sqlalchemy import func

from ..interfaces.user_repository_interface import UserInterface
from ....model.user import User as UserModel
from .... import db

logger = logging.getLogger(__name__)


class UserRepository(UserInterface):

    def get_user_by_login(self, login: str) -> Optional[UserModel]:
        if not login:
            return None
        return db.session.execute(
            db.select(UserModel).where(func.lower(UserModel.login) == login.lower())
        ).scalar_one_or_none()

    def create_user(self, login, password, email=None, first_name=None, last_name=None, commit=True) -> UserModel:
        try:
            user = UserModel(
                login=login,
                password=password,
                email=email,
                first_name=first_name,
                last_name=last_name
            )
            return user.save(commit=commit)
        except Exception as e:
            logger.error(f"[USER] Error saving user '{login}': {str(e)}")
            raise
