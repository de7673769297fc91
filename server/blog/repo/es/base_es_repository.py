"""
Base Elasticsearch Repository
==============================

Abstract base class for ES repositories: index management, single document
writes and bulk indexing. Document writes raise ``ElasticsearchError`` so
callers on the request path see index outages as failures.
"""

import logging
import json
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple
from abc import ABC, abstractmethod

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import ApiError, NotFoundError
from elastic_transport import TransportError
from elasticsearch.helpers import bulk

from ...common.exceptions import ElasticsearchError
from ...core.clients.elasticsearch_client import ElasticsearchClient

logger = logging.getLogger(__name__)


class BaseESRepository(ABC):
    """
    Base Elasticsearch Repository with common operations.

    Child classes must define:
    - INDEX_NAME: str
    - MAPPING_FILE: str (optional if override _load_mapping())
    """

    INDEX_NAME: str = None  # Override in child class
    MAPPING_FILE: str = None  # Override in child class

    def __init__(self, es_client: Optional[Elasticsearch] = None, index_name: Optional[str] = None):
        """
        Args:
            es_client: Elasticsearch client (defaults to singleton)
            index_name: Overrides INDEX_NAME (e.g. from configuration)
        """
        if index_name:
            self.INDEX_NAME = index_name
        if not self.INDEX_NAME:
            raise ValueError(f"{self.__class__.__name__} must define INDEX_NAME")

        self.es = es_client or ElasticsearchClient.get_instance()
        self.mapping = self._load_mapping()
        logger.info(f"[ES] Initialized {self.__class__.__name__} with index: {self.INDEX_NAME}")

    def _load_mapping(self) -> Dict:
        """Load index settings and mappings from mappings/<MAPPING_FILE>."""
        if not self.MAPPING_FILE:
            logger.warning(f"[ES] {self.__class__.__name__} has no MAPPING_FILE defined")
            return {}

        mapping_path = Path(__file__).parent / "mappings" / self.MAPPING_FILE
        if not mapping_path.exists():
            logger.error(f"[ES] Mapping file not found: {mapping_path}")
            raise FileNotFoundError(f"Mapping file not found: {mapping_path}")

        with open(mapping_path, 'r', encoding='utf-8') as f:
            mapping = json.load(f)

        logger.debug(f"[ES] Loaded ES mapping from: {mapping_path}")
        return mapping

    # =========================================================================
    # INDEX MANAGEMENT
    # =========================================================================

    def create_index(self, delete_if_exists: bool = False) -> bool:
        """
        Create index with mapping.

        Returns:
            True if the index exists afterwards
        """
        try:
            if self.es.indices.exists(index=self.INDEX_NAME):
                if delete_if_exists:
                    logger.warning(f"[ES] Deleting existing index: {self.INDEX_NAME}")
                    self.es.indices.delete(index=self.INDEX_NAME)
                else:
                    logger.info(f"[ES] Index {self.INDEX_NAME} already exists")
                    return True

            self.es.indices.create(
                index=self.INDEX_NAME,
                settings=self.mapping.get("settings"),
                mappings=self.mapping.get("mappings"),
            )
            logger.info(f"[ES] Created index: {self.INDEX_NAME}")
            return True

        except ApiError as e:
            logger.error(f"[ES] Failed to create index {self.INDEX_NAME}: {e}")
            return False

    def delete_index(self) -> bool:
        try:
            self.es.indices.delete(index=self.INDEX_NAME)
            logger.info(f"[ES] Deleted index: {self.INDEX_NAME}")
            return True
        except NotFoundError:
            logger.warning(f"[ES] Index {self.INDEX_NAME} not found")
            return False

    def index_exists(self) -> bool:
        return bool(self.es.indices.exists(index=self.INDEX_NAME))

    def ensure_index(self) -> bool:
        """Ensure index exists, create if not."""
        if not self.index_exists():
            return self.create_index()
        return True

    def count(self) -> int:
        try:
            result = self.es.count(index=self.INDEX_NAME)
            return result.get('count', 0)
        except NotFoundError:
            return 0

    # =========================================================================
    # DOCUMENTS
    # =========================================================================

    def index_document(self, doc: Dict, doc_id: Optional[str] = None) -> None:
        """
        Index (create or replace) a single document.

        Raises:
            ElasticsearchError: If the cluster rejects the write or is unreachable
        """
        try:
            self.es.index(index=self.INDEX_NAME, id=doc_id, document=doc)
            logger.debug(f"[ES] Indexed document in {self.INDEX_NAME}: {doc_id}")
        except (ApiError, TransportError) as e:
            logger.error(f"[ES] Failed to index document {doc_id} in {self.INDEX_NAME}: {e}")
            raise ElasticsearchError(
                f"Failed to index document {doc_id}",
                details={"index": self.INDEX_NAME}
            ) from e

    def delete_by_id(self, doc_id: str) -> bool:
        """
        Delete document by ID.

        Returns:
            True if a document was deleted, False if there was none

        Raises:
            ElasticsearchError: For any failure other than a missing document
        """
        try:
            self.es.delete(index=self.INDEX_NAME, id=doc_id)
            logger.debug(f"[ES] Deleted document from {self.INDEX_NAME}: {doc_id}")
            return True
        except NotFoundError:
            logger.debug(f"[ES] Document not found for deletion in {self.INDEX_NAME}: {doc_id}")
            return False
        except (ApiError, TransportError) as e:
            logger.error(f"[ES] Failed to delete document {doc_id} from {self.INDEX_NAME}: {e}")
            raise ElasticsearchError(
                f"Failed to delete document {doc_id}",
                details={"index": self.INDEX_NAME}
            ) from e

    def bulk_index(self, docs: List[Dict], id_field: str = "id") -> Tuple[int, int]:
        """
        Index many documents in one request.

        Returns:
            (success_count, failed_count)
        """
        if not docs:
            return (0, 0)
        actions = [
            {"_index": self.INDEX_NAME, "_id": doc[id_field], "_source": doc}
            for doc in docs
        ]
        success, failed = bulk(self.es, actions, stats_only=True, raise_on_error=False)
        logger.info(f"[ES] Bulk indexed into {self.INDEX_NAME}: {success} success, {failed} failed")
        return (success, failed)

    # =========================================================================
    # ABSTRACT METHODS
    # =========================================================================

    @abstractmethod
    def search(self, *args, **kwargs) -> Any:
        """Search documents. Must be implemented by child class."""
        pass
