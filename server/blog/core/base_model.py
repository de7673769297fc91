from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from .. import db, Base


class BaseModel(Base):
    """
    Abstract base for every table: an auto-increment integer primary key plus
    the persistence helpers the repositories rely on.
    """
    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def save(self, commit=True):
        db.session.add(self)
        if commit:
            try:
                db.session.commit()
            except Exception:
                db.session.rollback()
                raise
        return self

    def __repr__(self):
        return f'<{self.__class__.__name__} id={self.id}>'
