# incant/adapters/api/main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from incant.shared.config import settings
from incant.shared.container import container
from incant.shared.logging_config import configure_logging
from incant.shared.observability import setup_observability

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from incant.adapters.api.routers import decoding, dialects, health

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Wires DI container, builds and validates every configured dialect.
    2. Shutdown: Nothing to release; dialects are plain read-only memory.
    """
    logger.info("app_startup", env=settings.APP_ENV.value)

    # 1. Wire the Container
    container.wire(modules=[
        "incant.adapters.api.routers.decoding",
        "incant.adapters.api.routers.dialects",
        "incant.adapters.api.routers.health",
    ])

    # 2. Build dialects (Fail Fast: an ambiguous lexicon aborts startup)
    registry = container.dialect_registry()
    registry.load_all(settings.DIALECTS or None)

    yield

    logger.info("app_shutdown")
    container.unwire()


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Phoneme stream decoder for the spell engine",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    setup_observability(app)

    # Register Routers
    app.include_router(health.router)
    app.include_router(dialects.router)
    app.include_router(decoding.router)

    return app


# Entry point for local debugging (e.g. `python -m incant.adapters.api.main`)
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
