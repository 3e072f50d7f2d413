"""Conversion of records into JSON:API resource objects.

Handlers tell the formatter how to present their results by wrapping them
in one of two tagged types:

- ``ModelRecords`` for ORM instances whose model declares its own resource
  type and attribute list (see ``JSONAPIModelMixin``);
- ``PresentationReady`` for arbitrary records with a caller-chosen type and
  attribute list.

``serialize`` does the actual work and is a pure function.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

PRIMARY_KEY = "id"
_MISSING = object()

KeyStyle = Literal["as-is", "dash-case", "underscore_case", "camelCase"]

_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_\-\s]+")


def attribute_key(name: str, style: KeyStyle = "as-is") -> str:
    """Spell the field ``name`` as an attribute key in the given style.

    ``created_at`` becomes ``created-at`` (dash-case) or ``createdAt``
    (camelCase). ``as-is`` keeps the field name unchanged.
    """
    if style == "as-is":
        return name
    words = [word.lower() for word in _SEPARATORS.split(_WORD_BOUNDARY.sub(r"\1_\2", name)) if word]
    if not words:
        return name
    if style == "dash-case":
        return "-".join(words)
    if style == "underscore_case":
        return "_".join(words)
    return words[0] + "".join(word.capitalize() for word in words[1:])


@dataclass(frozen=True)
class ModelRecords:
    """One ORM instance, or a sequence of instances of the same model."""

    records: Any

    def is_empty(self) -> bool:
        return _is_empty(self.records)

    def serialize(self, key_style: KeyStyle = "as-is") -> dict[str, Any]:
        first = self.records[0] if _is_collection(self.records) else self.records
        model = type(first)
        return serialize(
            model.jsonapi_type(), model.jsonapi_attributes(), self.records, key_style=key_style
        )


@dataclass(frozen=True)
class PresentationReady:
    """Records paired with an explicit resource type and attribute list."""

    type: str
    attributes: Sequence[str]
    records: Any

    def is_empty(self) -> bool:
        return _is_empty(self.records)

    def serialize(self, key_style: KeyStyle = "as-is") -> dict[str, Any]:
        return serialize(self.type, self.attributes, self.records, key_style=key_style)


SerializableResult = ModelRecords | PresentationReady


def _is_collection(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_empty(records: Any) -> bool:
    return records is None or (_is_collection(records) and len(records) == 0)


def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, _MISSING)
    return getattr(record, name, _MISSING)


def _to_resource(
    resource_type: str,
    attributes: Sequence[str],
    record: Any,
    key_style: KeyStyle,
) -> dict[str, Any]:
    primary_key = _read(record, PRIMARY_KEY)
    resource: dict[str, Any] = {
        "id": None if primary_key is _MISSING or primary_key is None else str(primary_key),
        "type": resource_type,
    }
    values = {}
    for name in attributes:
        if name == PRIMARY_KEY:
            continue
        value = _read(record, name)
        if value is not _MISSING:
            values[attribute_key(name, key_style)] = value
    resource["attributes"] = values
    return resource


def serialize(
    resource_type: str,
    attributes: Sequence[str],
    records: Any,
    *,
    key_style: KeyStyle = "as-is",
) -> dict[str, Any]:
    """Build a JSON:API document whose ``data`` describes ``records``.

    Args:
        resource_type: Resource collection name used as every resource's ``type``.
        attributes: Names of the fields to expose. The primary key is never
            exposed as an attribute; it becomes the resource ``id``.
        records: A single record or a sequence of records. Records may be
            mappings or objects exposing the fields as attributes.
        key_style: How field names are spelled as attribute keys, see
            ``attribute_key``.

    Returns:
        ``{"data": resource}`` for a single record, ``{"data": [resource, ...]}``
        for a sequence.
    """
    if _is_collection(records):
        return {
            "data": [
                _to_resource(resource_type, attributes, record, key_style) for record in records
            ]
        }
    return {"data": _to_resource(resource_type, attributes, records, key_style)}
