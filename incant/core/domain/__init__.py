# incant/core/domain/__init__.py
"""
Domain Entities and Value Objects.

The "ubiquitous language" of the decoder: phonemes, syllables, words,
decoded units, instructions and programs, plus the domain errors.
"""
