"""Shared FastAPI dependencies for database sessions, pagination and JSON:API replies."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from burgerapi.jsonapi import JSONAPIReply
from burgerapi.schemas.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    PageParams,
)
from burgerapi.services.place_service import PlaceService
from burgerapi.services.review_service import ReviewService


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session from the app-level session factory.

    The session factory is stored on ``request.app.state.session_factory``
    by the application lifespan. The session auto-closes when the request ends.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_jsonapi(request: Request) -> JSONAPIReply:
    """Return a JSON:API reply bound to the current request.

    The formatter is registered on ``request.app.state.jsonapi`` by
    ``register_jsonapi`` when the application is created.
    """
    return JSONAPIReply(request, request.app.state.jsonapi)


async def get_page_params(
    page: int = Query(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE, description="page number"),
    size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="page size"),
) -> PageParams:
    """Read the requested page from the ``page``/``size`` query parameters."""
    return PageParams(page=page, size=size)


async def get_place_service(
    db: AsyncSession = Depends(get_db),
) -> PlaceService:
    """Provide a PlaceService instance with the current DB session."""
    return PlaceService(db)


async def get_review_service(
    db: AsyncSession = Depends(get_db),
) -> ReviewService:
    """Provide a ReviewService instance with the current DB session."""
    return ReviewService(db)
