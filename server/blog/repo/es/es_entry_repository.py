import logging
from typing import Dict, List

from elasticsearch.exceptions import ApiError
from elastic_transport import TransportError

from .base_es_repository import BaseESRepository
from .interfaces import ESEntryRepositoryInterface
from ...common.exceptions import ElasticsearchError
from ...utils.pagination import Page, PageRequest

logger = logging.getLogger(__name__)

# Text fields are sorted through their keyword sub-field
SORT_FIELD_ALIASES = {
    "title": "title.keyword",
    "blog.name": "blog.name.keyword",
}


class ESEntryRepository(BaseESRepository, ESEntryRepositoryInterface):
    INDEX_NAME = "entries"
    MAPPING_FILE = "entry_mapping.json"

    def save(self, entry: Dict) -> None:
        self.index_document(entry, doc_id=str(entry["id"]))

    def delete(self, entry_id: int) -> bool:
        return self.delete_by_id(str(entry_id))

    def _sort_clauses(self, page_request: PageRequest) -> List[Dict]:
        return [
            {SORT_FIELD_ALIASES.get(prop, prop): {"order": direction}}
            for prop, direction in page_request.sort
        ]

    def search(self, query: str, page_request: PageRequest) -> Page:
        """
        Run a Lucene query-string query (``title:python AND tags.name:flask``,
        ``"exact phrase"``, ``pyth*``...) across the entry documents.
        """
        search_kwargs = {
            "index": self.INDEX_NAME,
            "query": {"query_string": {"query": query}},
            "from_": page_request.offset,
            "size": page_request.size,
            "track_total_hits": True,
        }
        sort = self._sort_clauses(page_request)
        if sort:
            search_kwargs["sort"] = sort

        try:
            response = self.es.search(**search_kwargs)
        except (ApiError, TransportError) as e:
            logger.error(f"[ES] Search failed for query '{query}': {e}")
            raise ElasticsearchError(
                "Search request failed",
                details={"index": self.INDEX_NAME, "query": query}
            ) from e

        hits = response["hits"]["hits"]
        total = response["hits"]["total"]
        if isinstance(total, dict):
            total = total["value"]
        logger.debug(f"[ES] Query '{query}' matched {total} entries in {response.get('took', 0)}ms")

        return Page(
            content=[hit["_source"] for hit in hits],
            total=total,
            page=page_request.page,
            size=page_request.size,
        )
