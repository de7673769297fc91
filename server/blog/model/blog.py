from typing import Optional
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class Blog(BaseModel):
    __tablename__ = 'blogs'

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    handle: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('users.id'), nullable=True, index=True)

    user = relationship('User', back_populates='blogs', lazy='select')
    entries = relationship('Entry', back_populates='blog', lazy='dynamic')

    def __init__(self, name: str, handle: str, user_id: Optional[int] = None, **kwargs):
        self.name = name
        self.handle = handle
        self.user_id = user_id

    def to_display_dict(self):
        return {"id": self.id, "name": self.name, "handle": self.handle}

    def __repr__(self):
        return f"<Blog handle='{self.handle}'>"
