"""Cat API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatApiError → structured JSON responses
    - The connection pool is built once in the lifespan and disposed on shutdown
    - Missing DATABASE_URL aborts startup (pydantic ValidationError)

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup
    - Pool stored on app.state and injected via get_db_pool, not a module global
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catapi.api.error_handlers import register_error_handlers
from catapi.api.routes import cats, health
from catapi.config import get_settings
from catapi.infrastructure.database import create_db_pool
from catapi.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_pool = create_db_pool(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info(f"Cat API listening on {settings.host}:{settings.port}")
    yield
    await app.state.db_pool.dispose()
    logger.info("Cat API shutting down")


app = FastAPI(title="Cat API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cats.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("catapi.main:app", host=settings.host, port=settings.port)
