from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class Tag(BaseModel):
    __tablename__ = 'tags'

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    entries = relationship('Entry', secondary='entry_tag', back_populates='tags', lazy='select')

    def __init__(self, name: str, **kwargs):
        self.name = name

    def to_display_dict(self):
        return {"id": self.id, "name": self.name}
