"""Places CRUD endpoints returning JSON:API responses.

Provides create, list, get, update, and soft-delete operations for places.
Every response body is produced by the JSON:API formatter; the list
endpoint is paginated with the ``page``/``size`` query parameters.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path

from burgerapi.api.deps import get_jsonapi, get_page_params, get_place_service
from burgerapi.jsonapi import JSONAPIReply, JSONAPIResponse, ModelRecords
from burgerapi.models.place import Place
from burgerapi.schemas.jsonapi import JSONAPIRequest, JSONAPIUpdateRequest
from burgerapi.schemas.pagination import PageParams
from burgerapi.schemas.place import CreatePlaceRequest, UpdatePlaceRequest
from burgerapi.services.place_service import PlaceService

router = APIRouter()

PlaceId = Annotated[int, Path(ge=1, description="place id")]


def _check_type(resource_type: str) -> None:
    if resource_type != Place.jsonapi_type():
        raise HTTPException(
            status_code=409,
            detail=f"Resource type must be '{Place.jsonapi_type()}'",
        )


@router.get("")
async def list_places(
    page: PageParams = Depends(get_page_params),
    service: PlaceService = Depends(get_place_service),
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Get a list of places, newest first."""
    places, count = await service.list_places(limit=page.limit, offset=page.offset)
    return reply(ModelRecords(places), pagination=page.with_count(count))


@router.get("/{place_id}")
async def get_place(
    place_id: PlaceId,
    service: PlaceService = Depends(get_place_service),
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Get a place by the id passed in the path."""
    place = await service.get_place(place_id)
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return reply(ModelRecords(place))


@router.post("", status_code=201)
async def create_place(
    body: JSONAPIRequest[CreatePlaceRequest],
    service: PlaceService = Depends(get_place_service),
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Add a new place with the attributes passed in the body."""
    _check_type(body.data.type)
    attrs = body.data.attributes
    place = await service.create_place(
        name=attrs.name,
        location=attrs.location,
        picture=attrs.picture,
    )
    return reply(ModelRecords(place), status_code=201)


@router.patch("/{place_id}")
async def update_place(
    body: JSONAPIUpdateRequest[UpdatePlaceRequest],
    place_id: PlaceId,
    service: PlaceService = Depends(get_place_service),
    reply: JSONAPIReply = Depends(get_jsonapi),
) -> JSONAPIResponse:
    """Update the place identified in the path with the attributes passed in the body."""
    if str(body.data.id) != str(place_id):
        raise HTTPException(status_code=400, detail="IDs passed in both path and body must match")
    _check_type(body.data.type)

    update_data = body.data.attributes.model_dump(exclude_unset=True)
    try:
        place = await service.update_place(place_id, **update_data)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return reply(ModelRecords(place))


@router.delete("/{place_id}", status_code=204)
async def delete_place(
    place_id: PlaceId,
    service: PlaceService = Depends(get_place_service),
) -> None:
    """Soft-delete the place identified in the path."""
    try:
        await service.delete_place(place_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
