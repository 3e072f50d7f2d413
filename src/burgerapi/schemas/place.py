"""Pydantic v2 schemas for places CRUD API.

Defines the attribute payloads of create and update requests. Responses
are serialized from the Place model by the JSON:API formatter.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreatePlaceRequest(BaseModel):
    """Attributes of a new place."""

    name: str = Field(..., max_length=255, examples=["Best Burgers"])
    location: str = Field(..., max_length=255, examples=["56.960725,24.172814"])
    picture: str | None = Field(default=None, max_length=255)


class UpdatePlaceRequest(BaseModel):
    """Partial update request for an existing place.

    All fields are optional -- only provided (non-None) fields are applied.
    """

    name: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=255)
    picture: str | None = Field(default=None, max_length=255)
