"""Elasticsearch repository package"""

from .es_entry_repository import ESEntryRepository

__all__ = ['ESEntryRepository']
