"""Registration of the JSON:API formatter on a FastAPI application."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fastapi import FastAPI, Request

from burgerapi.jsonapi.errors import install_jsonapi_exception_handlers
from burgerapi.jsonapi.formatter import FormatterConfig, JSONAPIFormatter
from burgerapi.jsonapi.responses import JSONAPIResponse
from burgerapi.middleware import RequestIDMiddleware, get_request_id
from burgerapi.schemas.pagination import PaginationContext


def register_jsonapi(app: FastAPI, config: FormatterConfig) -> JSONAPIFormatter:
    """Install the formatter, the request id middleware and the error handlers.

    Must be called once, before the application starts serving.
    """
    formatter = JSONAPIFormatter(config)
    app.state.jsonapi = formatter
    app.add_middleware(RequestIDMiddleware)
    install_jsonapi_exception_handlers(app)
    return formatter


class JSONAPIReply:
    """Formats a handler result for the current request and wraps it in a response.

    Obtained in route handlers through the ``get_jsonapi`` dependency::

        return reply(ModelRecords(place))
    """

    def __init__(self, request: Request, formatter: JSONAPIFormatter) -> None:
        self.request = request
        self.formatter = formatter

    def __call__(
        self,
        result: Any = None,
        *,
        meta: Mapping[str, Any] | None = None,
        pagination: PaginationContext | Mapping[str, int] | None = None,
        type: str | None = None,
        attributes: Sequence[str] | None = None,
        status_code: int = 200,
    ) -> JSONAPIResponse:
        document = self.formatter.format(
            result,
            request_id=get_request_id(self.request),
            request_url=str(self.request.url),
            meta=meta,
            pagination=pagination,
            type=type,
            attributes=attributes,
        )
        return JSONAPIResponse(document, status_code=status_code)
