from .entry_repository_interface import EntryInterface
from .user_repository_interface import UserInterface

__all__ = ['EntryInterface', 'UserInterface']
