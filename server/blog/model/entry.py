"""
Entry Model (PostgreSQL)
========================

A blog post. Entries belong to a Blog (and through it to the Blog's user)
and carry any number of Tags.

Table: entries
"""

from datetime import datetime, timezone
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import String, Text, DateTime, Integer, ForeignKey, Table, Column, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .. import Base
from ..core.base_model import BaseModel

if TYPE_CHECKING:
    from .tag import Tag


entry_tag = Table(
    'entry_tag',
    Base.metadata,
    Column('entries_id', Integer, ForeignKey('entries.id', ondelete='CASCADE'), primary_key=True),
    Column('tags_id', Integer, ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
)


class Entry(BaseModel):
    __tablename__ = 'entries'

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    blog_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('blogs.id'), nullable=True)

    blog = relationship('Blog', back_populates='entries', lazy='select')
    tags: Mapped[List['Tag']] = relationship('Tag', secondary=entry_tag, back_populates='entries', lazy='select')

    __table_args__ = (
        Index('idx_entries_blog_date', 'blog_id', 'date'),
    )

    def __init__(self, title: str, content: Optional[str] = None, date: Optional[datetime] = None,
                 blog_id: Optional[int] = None, id: Optional[int] = None, **kwargs):
        if id is not None:
            self.id = id
        self.title = title
        self.content = content
        self.date = date or datetime.now(timezone.utc)
        self.blog_id = blog_id

    def to_display_dict(self):
        """
        Entry as returned by the API and stored in the search index:
        scalar columns plus the owning blog and the tags.
        """
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date.isoformat() if self.date else None,
            "blog": self.blog.to_display_dict() if self.blog else None,
            "tags": [tag.to_display_dict() for tag in sorted(self.tags, key=lambda t: t.id)],
        }

    def __repr__(self):
        return f"<Entry id={self.id} title='{self.title}'>"
