"""
Entry Repository Implementation (PostgreSQL)
============================================

Data access for the entries table through Flask-SQLAlchemy.
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import joinedload, selectinload

from ..interfaces.entry_repository_interface import EntryInterface
from ....model.blog import Blog as BlogModel
from ....model.entry import Entry as EntryModel
from ....model.tag import Tag as TagModel
from ....model.user import User as UserModel
from ....utils.pagination import Page, PageRequest
from .... import db

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "id": EntryModel.id,
    "title": EntryModel.title,
    "date": EntryModel.date,
}


class EntryRepository(EntryInterface):

    def _eager_options(self):
        return (joinedload(EntryModel.blog), selectinload(EntryModel.tags))

    def _sort_clauses(self, page_request: PageRequest):
        clauses = []
        for prop, direction in page_request.sort:
            column = SORTABLE_FIELDS.get(prop)
            if column is None:
                logger.warning(f"[ENTRY] Ignoring unknown sort property: {prop}")
                continue
            clauses.append(column.desc() if direction == "desc" else column.asc())
        return clauses

    # --- WRITE OPERATIONS ---

    def save(self, entry: EntryModel, tags: Optional[List[TagModel]] = None, commit: bool = True) -> EntryModel:
        """
        New entries are added; entries carrying the id of a stored row are merged
        into it. An id with no stored row is dropped and the row gets a fresh id
        from the database, so explicit ids never get ahead of the sequence.
        """
        try:
            if entry.id is not None and db.session.get(EntryModel, entry.id) is None:
                logger.info(f"[ENTRY] No entry with id {entry.id}; storing it under a new id")
                entry.id = None

            if entry.id is None:
                db.session.add(entry)
                persistent = entry
            else:
                persistent = db.session.merge(entry)
            if tags is not None:
                persistent.tags = tags
            if commit:
                db.session.commit()
            else:
                db.session.flush()
            return persistent
        except Exception as e:
            db.session.rollback()
            logger.error(f"[ENTRY] Failed to save entry: {e}")
            raise

    def delete(self, entry_id: int) -> None:
        entry = db.session.get(EntryModel, entry_id)
        if entry is None:
            logger.debug(f"[ENTRY] Nothing to delete for id {entry_id}")
            return
        try:
            db.session.delete(entry)
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            logger.error(f"[ENTRY] Failed to delete entry {entry_id}: {e}")
            raise

    # --- READ OPERATIONS ---

    def find_one_with_eager_relationships(self, entry_id: int) -> Optional[EntryModel]:
        return db.session.execute(
            db.select(EntryModel)
            .options(*self._eager_options())
            .where(EntryModel.id == entry_id)
        ).unique().scalar_one_or_none()

    def find_by_blog_user_login_order_by_date_desc(self, login: str, page_request: PageRequest) -> Page:
        base = (
            db.select(EntryModel)
            .join(EntryModel.blog)
            .join(BlogModel.user)
            .where(UserModel.login == login)
        )

        total = db.session.execute(
            db.select(func.count()).select_from(base.subquery())
        ).scalar_one()

        entries = db.session.execute(
            base.options(*self._eager_options())
            .order_by(EntryModel.date.desc(), *self._sort_clauses(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        ).unique().scalars().all()

        return Page(content=list(entries), total=total, page=page_request.page, size=page_request.size)

    def find_all(self) -> List[EntryModel]:
        return list(
            db.session.execute(
                db.select(EntryModel).options(*self._eager_options()).order_by(EntryModel.id)
            ).unique().scalars().all()
        )

    def find_tags_by_ids(self, tag_ids: List[int]) -> List[TagModel]:
        if not tag_ids:
            return []
        tags = db.session.execute(
            db.select(TagModel).where(TagModel.id.in_(tag_ids))
        ).scalars().all()
        if len(tags) != len(set(tag_ids)):
            found = {t.id for t in tags}
            logger.warning(f"[ENTRY] Unknown tag ids skipped: {sorted(set(tag_ids) - found)}")
        return list(tags)
