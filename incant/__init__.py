# incant/__init__.py
"""
Incant - phoneme stream decoder and lexicon validator.

This package follows Hexagonal Architecture (Ports & Adapters): the pure
decoding and validation logic lives in `incant.core`, while file loading,
the HTTP API and the CLI live in the adapters.
"""

__version__ = "1.0.0"
