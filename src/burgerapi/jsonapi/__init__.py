"""JSON:API response formatting for FastAPI applications."""

from burgerapi.jsonapi.formatter import (
    DocumentValidationError,
    FormatterConfig,
    JSONAPIFormatter,
    deep_merge,
)
from burgerapi.jsonapi.plugin import JSONAPIReply, register_jsonapi
from burgerapi.jsonapi.responses import JSONAPI_MEDIA_TYPE, JSONAPIResponse
from burgerapi.jsonapi.serializer import (
    ModelRecords,
    PresentationReady,
    attribute_key,
    serialize,
)

__all__ = [
    "JSONAPI_MEDIA_TYPE",
    "DocumentValidationError",
    "FormatterConfig",
    "JSONAPIFormatter",
    "JSONAPIReply",
    "JSONAPIResponse",
    "ModelRecords",
    "PresentationReady",
    "attribute_key",
    "deep_merge",
    "register_jsonapi",
    "serialize",
]
