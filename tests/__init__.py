# tests/__init__.py
"""
Test Suite for incant.

Organization:
- `core`: Alphabet, lexicon, validator, decoder, emitter and use cases (no I/O).
- `adapters`: Filesystem lexicon source against the shipped dialect data.
- `http_api`: FastAPI endpoints through the TestClient.
"""
