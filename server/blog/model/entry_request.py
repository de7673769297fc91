"""
Entry request payloads (pydantic).

Relationships are referenced by id, the way clients send them back after
reading an entry: ``{"blog": {"id": 3}, "tags": [{"id": 1}, {"id": 2}]}``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IdReference(BaseModel):
    """Reference to an existing row; extra fields (name, handle...) are ignored."""
    model_config = ConfigDict(extra="ignore")

    id: int


class EntryRequest(BaseModel):
    """Body of POST / PUT /api/entries."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    title: str = Field(..., max_length=255)
    content: Optional[str] = None
    date: Optional[datetime] = None
    blog: Optional[IdReference] = None
    tags: List[IdReference] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v):
        """Store every date in UTC; a date without an offset is taken as UTC."""
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def to_entity_data(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
            "blog_id": self.blog.id if self.blog else None,
            "tag_ids": [tag.id for tag in self.tags],
        }
