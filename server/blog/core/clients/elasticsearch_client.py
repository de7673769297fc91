"""
Elasticsearch Client Singleton
Manages the connection to the Elasticsearch cluster
"""

import logging
from typing import Optional
from elasticsearch import Elasticsearch

from config import Config

logger = logging.getLogger(__name__)


class ElasticsearchClient:
    """
    Singleton Elasticsearch client

    The client is built lazily and does not ping on creation: an unreachable
    cluster must not stop the app from starting, it surfaces as a failed
    request instead.

    Usage:
        es = ElasticsearchClient.get_instance()
        es.index(index='entries', id=1, document={...})

        if ElasticsearchClient.is_healthy():
            ...
    """

    _instance: Optional[Elasticsearch] = None

    @classmethod
    def get_instance(cls, config=None) -> Elasticsearch:
        """
        Get or create the Elasticsearch client instance

        Args:
            config: Object or mapping with ELASTICSEARCH_* settings (defaults to Config)
        """
        if cls._instance is None:
            cls._instance = cls._create_client(config or Config)

        return cls._instance

    @staticmethod
    def _setting(config, name, default=None):
        if isinstance(config, dict):
            return config.get(name, default)
        return getattr(config, name, default)

    @classmethod
    def _create_client(cls, config) -> Elasticsearch:
        """Create a new Elasticsearch client from configuration."""
        es_url = cls._setting(config, 'ELASTICSEARCH_URL', 'http://localhost:9200')
        api_key = cls._setting(config, 'ELASTICSEARCH_API_KEY')
        username = cls._setting(config, 'ELASTICSEARCH_USERNAME')
        password = cls._setting(config, 'ELASTICSEARCH_PASSWORD')

        client_config = {
            'hosts': [es_url],
            'request_timeout': cls._setting(config, 'ELASTICSEARCH_TIMEOUT', 30),
            'max_retries': cls._setting(config, 'ELASTICSEARCH_MAX_RETRIES', 3),
            'retry_on_timeout': True,
            'verify_certs': cls._setting(config, 'ELASTICSEARCH_VERIFY_CERTS', True),
        }

        if api_key:
            client_config['api_key'] = api_key
            logger.info(f"[ES] Using API key authentication for ES: {es_url}")
        elif username and password:
            client_config['basic_auth'] = (username, password)
            logger.info(f"[ES] Using basic authentication for ES: {es_url}")
        else:
            logger.info(f"[ES] Connecting to ES without authentication: {es_url}")

        return Elasticsearch(**client_config)

    @classmethod
    def is_healthy(cls) -> bool:
        """
        Check if the Elasticsearch cluster answers a ping

        Returns:
            True if cluster is reachable
        """
        try:
            if cls._instance is None:
                return False

            return bool(cls._instance.ping())
        except Exception as e:
            logger.warning(f"[ES] Elasticsearch health check failed: {e}")
            return False
