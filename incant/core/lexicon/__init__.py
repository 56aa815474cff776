# incant/core/lexicon/__init__.py
"""
Lexicon construction: dialect tables, word dictionaries and the
build-time ambiguity gate.
"""

from .dictionary import ValidatedDictionary, WordDictionary, single_syllable_dictionary
from .table import LexiconTable
from .validator import validate

__all__ = [
    "LexiconTable",
    "ValidatedDictionary",
    "WordDictionary",
    "single_syllable_dictionary",
    "validate",
]
