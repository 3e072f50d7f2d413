"""FastAPI application factory with async lifespan for the database and JSON:API formatting."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from burgerapi.api.v1.router import v1_router
from burgerapi.config import Settings, get_settings
from burgerapi.database import close_db, get_session_factory, init_db
from burgerapi.jsonapi import FormatterConfig, register_jsonapi

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    On startup: initialize the database engine (creating missing tables)
    and the session factory.
    On shutdown: dispose of the engine.
    """
    settings: Settings = app.state.settings

    engine = await init_db(settings.database_url)
    app.state.db_engine = engine
    app.state.session_factory = get_session_factory(engine)
    logger.info("Server running, links resolved against %s", settings.base_url)

    yield

    await close_db(engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn burgerapi.app:create_app --factory
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title="Burger API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    register_jsonapi(
        app,
        FormatterConfig(
            base_url=settings.base_url,
            meta=settings.jsonapi_meta,
            strict=settings.jsonapi_strict,
            key_style=settings.jsonapi_key_style,
        ),
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app
