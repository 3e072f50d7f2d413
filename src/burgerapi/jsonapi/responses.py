"""Response class carrying JSON:API documents."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(JSONResponse):
    """JSON response with the ``application/vnd.api+json`` media type.

    Content is passed through ``jsonable_encoder`` first so attribute values
    taken straight from ORM rows (datetimes, decimals) render as JSON.
    """

    media_type = JSONAPI_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        return super().render(jsonable_encoder(content))
