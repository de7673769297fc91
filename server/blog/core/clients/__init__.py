from .elasticsearch_client import ElasticsearchClient

__all__ = ['ElasticsearchClient']
