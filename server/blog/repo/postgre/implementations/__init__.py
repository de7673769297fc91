from .entry_repository import EntryRepository
from .user_repository import UserRepository

__all__ = ['EntryRepository', 'UserRepository']
