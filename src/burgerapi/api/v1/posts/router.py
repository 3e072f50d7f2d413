"""Posts endpoint: the review feed grouped by day and item.

Each post is a ``posts`` resource identified by ``<day>:<item id>`` whose
``reviews`` relationship links the reviews written about that item on that
day. The reviews themselves are sideloaded in ``included``.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from burgerapi.api.deps import get_jsonapi, get_review_service
from burgerapi.jsonapi import JSONAPIReply, JSONAPIResponse, ModelRecords
from burgerapi.models.review import Review
from burgerapi.services.review_service import ReviewService, group_posts

router = APIRouter()


def _post_resource(day: str, item_id: int, reviews: list[Review]) -> dict[str, Any]:
    """Build a JSON:API resource object for one day/item group."""
    return {
        "id": f"{day}:{item_id}",
        "type": "posts",
        "attributes": {"date": day, "item": str(item_id)},
        "relationships": {
            "reviews": {
                "data": [{"id": str(review.id), "type": Review.jsonapi_type()} for review in reviews]
            }
        },
    }


@router.get("")
async def list_posts(
    service: ReviewService = Depends(get_review_service),
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Get the reviews grouped by day (newest first) and by item."""
    reviews = await service.list_reviews()
    if not reviews:
        return reply([])

    posts = [
        _post_resource(day, item_id, item_reviews)
        for day, by_item in group_posts(reviews).items()
        for item_id, item_reviews in by_item.items()
    ]
    included = ModelRecords(reviews).serialize(reply.formatter.config.key_style)["data"]
    return reply({"data": posts, "included": included})
