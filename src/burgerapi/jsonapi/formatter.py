"""JSON:API response formatter.

``JSONAPIFormatter.format`` turns whatever a route handler produced into a
JSON:API document:

1. request id, configured default meta and per-call meta are merged;
2. empty results short-circuit to ``{"data": [], "meta": ...}``;
3. pagination counters are added to the meta;
4. tagged results (``ModelRecords``/``PresentationReady``) or an explicit
   ``type``/``attributes`` pair are serialized, other values pass through;
5. the document is validated (advisory by default, see ``FormatterConfig``);
6. ``links.self`` is added and relative links are made absolute;
7. the merged meta is attached.

The formatter holds nothing but its immutable configuration and never
mutates the objects it is given.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urljoin, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from burgerapi.jsonapi.serializer import KeyStyle, ModelRecords, PresentationReady, serialize
from burgerapi.schemas.jsonapi import Violation, validate_document
from burgerapi.schemas.pagination import PaginationContext

logger = logging.getLogger(__name__)


class FormatterConfig(BaseModel):
    """Process-wide formatter settings, fixed at startup.

    Attributes:
        base_url: Base against which relative links are resolved.
        meta: Default meta members added to every document.
        strict: Raise ``DocumentValidationError`` for non-conforming
            documents instead of logging a warning.
        key_style: Spelling of serialized attribute keys. ``as-is`` keeps
            the field names, ``dash-case`` turns ``created_at`` into
            ``created-at``.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    meta: dict[str, Any] = Field(default_factory=dict)
    strict: bool = False
    key_style: KeyStyle = "as-is"


class DocumentValidationError(Exception):
    """A formatted document does not conform to JSON:API (strict mode only)."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = violations
        summary = "; ".join(f"{v.path}: {v.message}" for v in violations)
        super().__init__(f"Invalid JSON:API document: {summary}")


def deep_merge(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings left to right into a new dict.

    Nested mappings are merged recursively; any other value from a later
    source replaces the earlier one. ``None`` sources are skipped.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            current = merged.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                merged[key] = deep_merge(current, value)
            else:
                merged[key] = copy.deepcopy(value)
    return merged


def _is_empty(result: Any) -> bool:
    if result is None:
        return True
    if isinstance(result, (ModelRecords, PresentationReady)):
        return result.is_empty()
    return isinstance(result, (list, tuple)) and not result


class JSONAPIFormatter:
    """Builds JSON:API documents from handler results.

    Args:
        config: Immutable process-wide settings.
    """

    def __init__(self, config: FormatterConfig) -> None:
        self.config = config

    def base_meta(self, request_id: str) -> dict[str, Any]:
        """Meta present on every document, errors included."""
        return deep_merge({"id": request_id}, self.config.meta)

    def format(
        self,
        result: Any,
        *,
        request_id: str,
        request_url: str,
        meta: Mapping[str, Any] | None = None,
        pagination: PaginationContext | Mapping[str, int] | None = None,
        type: str | None = None,
        attributes: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Format ``result`` as a JSON:API document.

        Args:
            result: ``None`` or an empty list, a ``ModelRecords`` or
                ``PresentationReady`` wrapper, raw records (with ``type``
                and ``attributes``), or an already JSON:API-shaped value.
            request_id: Unique id of the current request, exposed as ``meta.id``.
            request_url: Full URL of the current request, used as ``links.self``.
            meta: Extra meta members for this document.
            pagination: Page counters of a list result.
            type: Resource type for raw records.
            attributes: Attribute names for raw records.

        Returns:
            The document as a plain ``dict``.

        Raises:
            DocumentValidationError: In strict mode, when the document does
                not conform to JSON:API.
        """
        document_meta = deep_merge(self.base_meta(request_id), meta)

        if _is_empty(result):
            return {"data": [], "meta": document_meta}

        if pagination is not None:
            if not isinstance(pagination, PaginationContext):
                pagination = PaginationContext.model_validate(pagination)
            document_meta = deep_merge(document_meta, pagination.to_meta())

        document = self._to_document(result, type, attributes)
        self._validate(document)

        links = document.get("links")
        links = dict(links) if isinstance(links, Mapping) else {}
        links.setdefault("self", request_url)
        document["links"] = {name: self._absolute(link) for name, link in links.items()}
        handler_meta = document.get("meta")
        if not isinstance(handler_meta, Mapping):
            handler_meta = None
        document["meta"] = deep_merge(handler_meta, document_meta)
        return document

    def _to_document(
        self,
        result: Any,
        type: str | None,
        attributes: Sequence[str] | None,
    ) -> dict[str, Any]:
        if isinstance(result, (ModelRecords, PresentationReady)):
            return result.serialize(self.config.key_style)
        if type is not None and attributes is not None:
            return serialize(type, attributes, result, key_style=self.config.key_style)
        if isinstance(result, BaseModel):
            result = result.model_dump(exclude_none=True)
        if isinstance(result, Mapping) and ("data" in result or "errors" in result):
            return dict(result)
        return {"data": result}

    def _validate(self, document: dict[str, Any]) -> None:
        outcome = validate_document(document)
        if outcome.valid:
            return
        if self.config.strict:
            raise DocumentValidationError(outcome.violations)
        for violation in outcome.violations:
            logger.warning(
                "JSON:API document violation at %s: %s", violation.path, violation.message
            )

    def _absolute(self, link: Any) -> Any:
        if isinstance(link, str):
            return self._resolve(link)
        if isinstance(link, Mapping) and isinstance(link.get("href"), str):
            return {**link, "href": self._resolve(link["href"])}
        return link

    def _resolve(self, url: str) -> str:
        if urlsplit(url).hostname:
            return url
        return urljoin(self.config.base_url, url)
