"""Pydantic schemas for API request/response models."""

from burgerapi.schemas.jsonapi import (
    DocumentValidationResult,
    JSONAPIDocument,
    JSONAPIError,
    JSONAPIRelationship,
    JSONAPIRequest,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
    JSONAPIUpdateRequest,
    Violation,
    validate_document,
)
from burgerapi.schemas.pagination import PageParams, PaginationContext

__all__ = [
    "DocumentValidationResult",
    "JSONAPIDocument",
    "JSONAPIError",
    "JSONAPIRelationship",
    "JSONAPIRequest",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "JSONAPIUpdateRequest",
    "PageParams",
    "PaginationContext",
    "Violation",
    "validate_document",
]
