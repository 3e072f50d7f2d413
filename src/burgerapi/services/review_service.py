"""Review read service and the grouping of reviews into posts.

A post is the set of reviews written about one item on one day. Posts
are ordered newest day first; within a day, items appear in the order
of their most recent review.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from burgerapi.models.review import Review

logger = logging.getLogger(__name__)

DAY_FORMAT = "%Y-%m-%d"


class ReviewService:
    """Service for reading reviews.

    Args:
        db: Async SQLAlchemy session for database operations.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_reviews(self) -> list[Review]:
        """List every review that has not been deleted, newest first."""
        result = await self.db.execute(
            select(Review)
            .where(Review.deleted_at.is_(None))
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(result.scalars().all())


def group_posts(reviews: list[Review]) -> dict[str, dict[int, list[Review]]]:
    """Group reviews by day (``YYYY-MM-DD``), then by item id.

    The input order is kept inside every group, so newest-first input
    yields newest-first days, items and reviews.
    """
    posts: dict[str, dict[int, list[Review]]] = {}
    for review in reviews:
        day = review.created_at.strftime(DAY_FORMAT)
        posts.setdefault(day, {}).setdefault(review.item_id, []).append(review)
    return posts
