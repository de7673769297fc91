from abc import ABC, abstractmethod
from typing import Optional

from ....model.user import User as UserModel


class UserInterface(ABC):
    """Abstract interface for User repository operations."""

    @abstractmethod
    def get_user_by_login(self, login: str) -> Optional[UserModel]:
        """Case-insensitive lookup by login."""
        pass

    @abstractmethod
    def create_user(self, login: str, password: str, email: Optional[str] = None,
                    first_name: Optional[str] = None, last_name: Optional[str] = None,
                    commit: bool = True) -> UserModel:
        pass
