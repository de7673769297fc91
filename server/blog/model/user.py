from typing import Optional
from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import expression
from werkzeug.security import generate_password_hash, check_password_hash

from ..core.base_model import BaseModel


class User(BaseModel):
    __tablename__ = 'users'

    login: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    activated: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, server_default=expression.true())

    blogs = relationship('Blog', back_populates='user', lazy='select')

    def __init__(self, login: str, password: str, email: Optional[str] = None,
                 first_name: Optional[str] = None, last_name: Optional[str] = None,
                 activated: bool = True, **kwargs):
        # Logins are case-insensitive and stored lower-cased
        self.login = login.lower()
        self.set_password(password)
        self.email = email
        self.first_name = first_name
        self.last_name = last_name
        self.activated = activated

    def set_password(self, password: str):
        """Hash and store the password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User login='{self.login}'>"
