"""
Entry Repository Interface
==========================

Contract of the relational entry store.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....model.entry import Entry as EntryModel
from ....model.tag import Tag as TagModel
from ....utils.pagination import Page, PageRequest


class EntryInterface(ABC):
    """Abstract interface for Entry repository operations."""

    # --- WRITE OPERATIONS ---

    @abstractmethod
    def save(self, entry: EntryModel, tags: Optional[List[TagModel]] = None, commit: bool = True) -> EntryModel:
        """
        Insert a new entry (no id) or replace the entry with the given id.
        When ``tags`` is given it replaces the entry's tag set.

        Returns:
            The persistent entry, with its id assigned
        """
        pass

    @abstractmethod
    def delete(self, entry_id: int) -> None:
        """Delete the entry with the given id; a missing id is not an error."""
        pass

    # --- READ OPERATIONS ---

    @abstractmethod
    def find_one_with_eager_relationships(self, entry_id: int) -> Optional[EntryModel]:
        """Entry with its blog and tags loaded, or None."""
        pass

    @abstractmethod
    def find_by_blog_user_login_order_by_date_desc(self, login: str, page_request: PageRequest) -> Page:
        """Page of entries whose blog belongs to ``login``, newest first."""
        pass

    @abstractmethod
    def find_all(self) -> List[EntryModel]:
        """Every entry with relationships loaded (used to rebuild the search index)."""
        pass

    @abstractmethod
    def find_tags_by_ids(self, tag_ids: List[int]) -> List[TagModel]:
        """Tags matching the given ids; unknown ids are skipped."""
        pass
