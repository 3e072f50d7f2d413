"""Place CRUD service layer.

Provides create, paginated list, get, update and soft-delete operations for
places. Deleted places keep their row with ``deleted_at`` set and are
invisible to every read.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from burgerapi.models.place import Place

logger = logging.getLogger(__name__)


class PlaceService:
    """Service for place CRUD operations with offset pagination.

    Args:
        db: Async SQLAlchemy session for database operations.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_place(
        self,
        name: str,
        location: str,
        picture: str | None = None,
    ) -> Place:
        """Create a new place.

        Args:
            name: Display name of the place.
            location: Free-form location, e.g. ``"56.960725,24.172814"``.
            picture: Optional picture URL.

        Returns:
            The created Place record.
        """
        place = Place(name=name, location=location, picture=picture)
        self.db.add(place)
        await self.db.commit()
        await self.db.refresh(place)
        logger.info("Created place %s", place.id)
        return place

    async def list_places(self, limit: int = 20, offset: int = 0) -> tuple[list[Place], int]:
        """List places, newest first.

        Args:
            limit: Maximum number of places to return.
            offset: Number of places to skip.

        Returns:
            Tuple of (places on this page, total number of places).
        """
        count_result = await self.db.execute(
            select(func.count()).select_from(Place).where(Place.deleted_at.is_(None))
        )
        count = count_result.scalar_one()

        result = await self.db.execute(
            select(Place)
            .where(Place.deleted_at.is_(None))
            .order_by(Place.created_at.desc(), Place.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all()), count

    async def get_place(self, place_id: int) -> Place | None:
        """Get a place by id.

        Returns:
            The Place record, or None if not found or deleted.
        """
        result = await self.db.execute(
            select(Place).where(Place.id == place_id, Place.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def update_place(self, place_id: int, **kwargs: object) -> Place:
        """Partial update of a place's fields.

        Args:
            place_id: Id of the place to update.
            **kwargs: Fields to update (name, location, picture).

        Returns:
            The updated Place record.

        Raises:
            ValueError: If the place is not found or deleted.
        """
        place = await self.get_place(place_id)
        if place is None:
            raise ValueError(f"Place not found: {place_id}")

        for field, value in kwargs.items():
            if value is not None:
                setattr(place, field, value)

        await self.db.commit()
        await self.db.refresh(place)
        return place

    async def delete_place(self, place_id: int) -> None:
        """Soft-delete a place by setting deleted_at.

        Raises:
            ValueError: If the place is not found or already deleted.
        """
        place = await self.get_place(place_id)
        if place is None:
            raise ValueError(f"Place not found: {place_id}")

        place.deleted_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info("Deleted place %s", place_id)
