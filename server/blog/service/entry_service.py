"""
Entry Service
=============

Keeps the relational store and the search index in step: every write goes
to the store first and is then mirrored into the index before returning.
The two writes are not transactional; if the index write fails the store
change stays and the error propagates to the caller.
"""

import logging
from typing import Any, Dict, Optional

from ..model.entry import Entry as EntryModel
from ..repo.es.interfaces import ESEntryRepositoryInterface
from ..repo.postgre.interfaces.entry_repository_interface import EntryInterface
from ..utils.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class EntryService:
    """Service layer for blog entries."""

    def __init__(self, entry_repo: EntryInterface, es_entry_repo: ESEntryRepositoryInterface):
        """
        Args:
            entry_repo: Relational entry store
            es_entry_repo: Entry search index
        """
        self.entry_repo = entry_repo
        self.es_entry_repo = es_entry_repo

    def save(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Persist an entry (insert when ``data`` has no id, replace otherwise)
        and index the stored result.

        Args:
            data: Validated entry fields: id, title, content, date, blog_id, tag_ids

        Returns:
            The stored entry, serialized
        """
        entry = EntryModel(
            id=data.get("id"),
            title=data["title"],
            content=data.get("content"),
            date=data.get("date"),
            blog_id=data.get("blog_id"),
        )
        tags = self.entry_repo.find_tags_by_ids(data.get("tag_ids") or [])

        stored = self.entry_repo.save(entry, tags=tags)
        document = stored.to_display_dict()
        self.es_entry_repo.save(document)

        logger.info(f"[ENTRY] Saved entry {stored.id}")
        return document

    def find_one(self, entry_id: int) -> Optional[Dict[str, Any]]:
        entry = self.entry_repo.find_one_with_eager_relationships(entry_id)
        return entry.to_display_dict() if entry else None

    def find_page_for_login(self, login: str, page_request: PageRequest) -> Page:
        """Entries owned by ``login`` (through their blog), newest first."""
        page = self.entry_repo.find_by_blog_user_login_order_by_date_desc(login, page_request)
        return page.model_copy(update={"content": [e.to_display_dict() for e in page.content]})

    def delete(self, entry_id: int) -> None:
        self.entry_repo.delete(entry_id)
        self.es_entry_repo.delete(entry_id)
        logger.info(f"[ENTRY] Deleted entry {entry_id}")

    def search(self, query: str, page_request: PageRequest) -> Page:
        return self.es_entry_repo.search(query, page_request)

    def reindex_all(self) -> Dict[str, int]:
        """
        Rebuild the search index from the store.

        Returns:
            Dict with indexed / failed counts
        """
        self.es_entry_repo.create_index(delete_if_exists=True)
        docs = [entry.to_display_dict() for entry in self.entry_repo.find_all()]
        indexed, failed = self.es_entry_repo.bulk_index(docs)
        logger.info(f"[ENTRY] Reindexed entries: {indexed} indexed, {failed} failed")
        return {"indexed": indexed, "failed": failed}
