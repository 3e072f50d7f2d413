"""System router providing health check and operational endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text

from burgerapi.api.deps import get_jsonapi
from burgerapi.jsonapi import JSONAPIReply, JSONAPIResponse

logger = logging.getLogger(__name__)

router = APIRouter()

HEALTH_ATTRIBUTES = ["status", "database"]


@router.get("/health")
async def health_check(
    request: Request,
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Return system health status including database connectivity.

    Returns a JSON:API formatted response with type ``system-health``,
    reporting the overall status as ``healthy`` or ``degraded`` when the
    database cannot be reached.
    """
    db_ok = False
    try:
        session_factory = request.app.state.session_factory
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
        db_ok = True
    except Exception:
        logger.warning("Database health check failed", exc_info=True)

    health = {
        "id": "current",
        "status": "healthy" if db_ok else "degraded",
        "database": "connected" if db_ok else "disconnected",
    }
    return reply(health, type="system-health", attributes=HEALTH_ATTRIBUTES)
