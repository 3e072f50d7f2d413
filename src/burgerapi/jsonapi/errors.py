"""Global rewriting of framework errors into JSON:API error documents.

Every error response leaving the application, whether raised by a route
handler, by request validation, by routing (404/405) or by an unexpected
exception, is turned into a document with a single error object::

    {"errors": [{"title": ..., "status": ..., "detail": ...}], "meta": {"id": ...}}

served as ``application/vnd.api+json``.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from burgerapi.jsonapi.formatter import DocumentValidationError, JSONAPIFormatter
from burgerapi.jsonapi.responses import JSONAPIResponse
from burgerapi.middleware import REQUEST_ID_HEADER, get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "An internal server error occurred"


def status_title(status_code: int) -> str:
    """Standard reason phrase for ``status_code``."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP Error"


def error_document(request: Request, status_code: int, detail: str) -> dict[str, Any]:
    """Build a single-error JSON:API document for the current request."""
    formatter: JSONAPIFormatter = request.app.state.jsonapi
    return {
        "errors": [
            {
                "title": status_title(status_code),
                "status": str(status_code),
                "detail": detail,
            }
        ],
        "meta": formatter.base_meta(get_request_id(request)),
    }


def error_response(
    request: Request,
    status_code: int,
    detail: str,
    headers: dict[str, str] | None = None,
) -> JSONAPIResponse:
    response_headers = {REQUEST_ID_HEADER: get_request_id(request)}
    if headers:
        response_headers.update(headers)
    return JSONAPIResponse(
        error_document(request, status_code, detail),
        status_code=status_code,
        headers=response_headers,
    )


def _validation_detail(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = str(error.get("msg", "Invalid value"))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Request validation failed"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    headers = getattr(exc, "headers", None)
    if exc.status_code in (HTTPStatus.NO_CONTENT, HTTPStatus.NOT_MODIFIED):
        return Response(status_code=exc.status_code, headers=headers)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(request, exc.status_code, detail, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    return error_response(request, HTTPStatus.BAD_REQUEST.value, _validation_detail(exc))


async def document_validation_handler(request: Request, exc: DocumentValidationError) -> Response:
    logger.error("Request %s produced an invalid document: %s", get_request_id(request), exc)
    return error_response(
        request,
        HTTPStatus.INTERNAL_SERVER_ERROR.value,
        "Response document failed JSON:API validation",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error while processing request %s", get_request_id(request))
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR.value, INTERNAL_ERROR_DETAIL)


def install_jsonapi_exception_handlers(app: FastAPI) -> None:
    """Route every error response of ``app`` through the JSON:API error format."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DocumentValidationError, document_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
