# incant/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the core and the adapters:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
- Dependency Injection wiring
"""
