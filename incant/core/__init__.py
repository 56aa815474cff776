# incant/core/__init__.py
"""
Core Domain Layer.

Pure decoding and lexicon-validation logic. It follows the Hexagonal
Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks (FastAPI) or on the filesystem.
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
