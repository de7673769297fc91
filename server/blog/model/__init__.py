from .user import User
from .blog import Blog
from .tag import Tag
from .entry import Entry, entry_tag

__all__ = ['User', 'Blog', 'Tag', 'Entry', 'entry_tag']
