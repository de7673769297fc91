"""Elasticsearch Repository Interfaces Package"""

from .es_entry_repository_interface import ESEntryRepositoryInterface

__all__ = ['ESEntryRepositoryInterface']
