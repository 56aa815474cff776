# incant/shared/container.py
from dependency_injector import containers, providers

from incant.adapters.persistence.filesystem_repo import FileSystemLexiconRepository
from incant.core.use_cases.build_dialect import BuildDialect
from incant.core.use_cases.decode_spell import DecodeSpell
from incant.services.dialect_registry import DialectRegistry
from incant.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Persistence (Singleton: one access point to the dialect files)
    lexicon_repository = providers.Singleton(
        FileSystemLexiconRepository,
        base_path=settings.DATA_PATH,
    )

    # Process-wide dialect store (Singleton: built once, shared read-only)
    dialect_registry = providers.Singleton(
        DialectRegistry,
        repo=lexicon_repository,
    )

    # 3. Use Cases (Application Logic)
    # Factory: stateless logic, new instance per request with Singleton dependencies.

    build_dialect_use_case = providers.Factory(
        BuildDialect,
        repo=lexicon_repository,
    )

    decode_spell_use_case = providers.Factory(
        DecodeSpell,
        registry=dialect_registry,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
