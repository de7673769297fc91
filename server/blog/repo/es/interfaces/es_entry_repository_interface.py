from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from ....utils.pagination import Page, PageRequest


class ESEntryRepositoryInterface(ABC):
    """
    Abstract interface for the entry search index.

    Implementations:
    - ESEntryRepository - Production Elasticsearch implementation
    - InMemoryESEntryRepository (tests) - dictionary-backed stand-in
    """

    # =========================================================================
    # INDEX MANAGEMENT
    # =========================================================================

    @abstractmethod
    def create_index(self, delete_if_exists: bool = False) -> bool:
        """Create the entry index with proper mapping."""
        pass

    @abstractmethod
    def delete_index(self) -> bool:
        pass

    @abstractmethod
    def index_exists(self) -> bool:
        pass

    @abstractmethod
    def ensure_index(self) -> bool:
        """Ensure index exists, create if not."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    # =========================================================================
    # INDEXING
    # =========================================================================

    @abstractmethod
    def save(self, entry: Dict) -> None:
        """Index (or replace) one serialized entry, keyed by its id."""
        pass

    @abstractmethod
    def delete(self, entry_id: int) -> bool:
        """Remove an entry from the index; False if it was not indexed."""
        pass

    @abstractmethod
    def bulk_index(self, docs: List[Dict], id_field: str = "id") -> Tuple[int, int]:
        pass

    # =========================================================================
    # SEARCHING
    # =========================================================================

    @abstractmethod
    def search(self, query: str, page_request: PageRequest) -> Page:
        """Query-string search returning a page of serialized entries."""
        pass
