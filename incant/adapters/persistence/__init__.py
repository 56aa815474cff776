# incant/adapters/persistence/__init__.py
from .filesystem_repo import FileSystemLexiconRepository

__all__ = ["FileSystemLexiconRepository"]
