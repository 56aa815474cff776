# incant/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters implement so the core can read
lexicon data without knowing where it lives.
"""

from .lexicon_repository import ILexiconRepository

__all__ = [
    "ILexiconRepository",
]
