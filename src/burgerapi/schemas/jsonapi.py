"""JSON:API document models using Pydantic v2.

Describes the shape of a JSON:API top-level document (resources, resource
identifiers, relationships, errors and links) and exposes
``validate_document`` to check an arbitrary value against it. Validation
never raises: callers receive a ``DocumentValidationResult`` listing every
violated constraint with its path and decide themselves whether a
violation is fatal.

Request bodies use the ``JSONAPIRequest`` wrappers.

Reference: https://jsonapi.org/format/
"""

from collections.abc import Mapping
from typing import Annotated, Any, Generic, TypeVar

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    model_validator,
)

T = TypeVar("T")

ROOT_PATH = "(root)"


# ---------------------------------------------------------------------------
# Request wrappers
# ---------------------------------------------------------------------------


class JSONAPIRequestData(BaseModel, Generic[T]):
    """The ``data`` object inside a JSON:API request body."""

    type: str
    attributes: T


class JSONAPIRequest(BaseModel, Generic[T]):
    """JSON:API request envelope wrapping ``{ data: { type, attributes } }``."""

    data: JSONAPIRequestData[T]


class JSONAPIUpdateRequestData(JSONAPIRequestData[T], Generic[T]):
    """The ``data`` object of an update request, which must name the resource id."""

    id: str | int


class JSONAPIUpdateRequest(BaseModel, Generic[T]):
    """JSON:API request envelope wrapping ``{ data: { type, id, attributes } }``."""

    data: JSONAPIUpdateRequestData[T]


# ---------------------------------------------------------------------------
# Document shape
# ---------------------------------------------------------------------------


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class JSONAPILinkObject(_Strict):
    """A link expressed as an object with an ``href`` and ``meta``."""

    href: AnyUrl
    meta: dict[str, Any]


def _link_kind(value: Any) -> str:
    if isinstance(value, (Mapping, JSONAPILinkObject)):
        return "link-object"
    return "uri"


JSONAPILink = Annotated[
    Annotated[AnyUrl, Tag("uri")] | Annotated[JSONAPILinkObject, Tag("link-object")],
    Discriminator(_link_kind),
]


class JSONAPIResourceIdentifier(_Strict):
    """Minimal reference to a resource, used as relationship linkage."""

    id: Any
    type: str = Field(min_length=1)
    meta: dict[str, Any] | None = None


class JSONAPIRelationship(_Strict):
    """A named link between a resource and one or more other resources."""

    links: dict[str, Any] | None = None
    data: "JSONAPIPrimaryData | None" = None
    meta: dict[str, Any] | None = None


class JSONAPIResource(_Strict):
    """A single JSON:API resource object."""

    id: Any
    type: str = Field(min_length=1)
    attributes: dict[str, Any] | None = None
    relationships: dict[str, JSONAPIRelationship] | None = None
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


IDENTIFIER_MEMBERS = frozenset({"id", "type", "meta"})


def _is_identifier(value: Any) -> bool:
    if isinstance(value, Mapping):
        return set(value) <= IDENTIFIER_MEMBERS
    return isinstance(value, JSONAPIResourceIdentifier)


def _primary_data_kind(value: Any) -> str | None:
    # Objects carrying nothing beyond id, type and meta are identifiers.
    if isinstance(value, list):
        return "identifiers" if all(_is_identifier(item) for item in value) else "resources"
    if isinstance(value, (Mapping, JSONAPIResource, JSONAPIResourceIdentifier)):
        return "identifier" if _is_identifier(value) else "resource"
    return None


# Full resources and bare identifiers are both accepted wherever primary
# data may appear, singly or as a (possibly empty) list.
JSONAPIPrimaryData = Annotated[
    Annotated[JSONAPIResource, Tag("resource")]
    | Annotated[JSONAPIResourceIdentifier, Tag("identifier")]
    | Annotated[list[JSONAPIResource], Tag("resources")]
    | Annotated[list[JSONAPIResourceIdentifier], Tag("identifiers")],
    Discriminator(_primary_data_kind),
]

JSONAPIRelationship.model_rebuild()
JSONAPIResource.model_rebuild()


class JSONAPIErrorLinks(_Strict):
    about: JSONAPILink | None = None


class JSONAPIErrorSource(_Strict):
    pointer: str | None = None
    parameter: str | None = None


class JSONAPIError(_Strict):
    """A single JSON:API error object."""

    id: Any = None
    links: JSONAPIErrorLinks | None = None
    status: str | None = None
    code: str | None = None
    title: str | None = None
    detail: str | None = None
    source: JSONAPIErrorSource | None = None
    meta: dict[str, Any] | None = None


class JSONAPIObject(_Strict):
    """The ``jsonapi`` member describing the server's implementation."""

    version: str | None = None
    meta: dict[str, Any] | None = None


class JSONAPIDocument(_Strict):
    """A JSON:API top-level document.

    Exactly one of ``data`` and ``errors`` must be present.
    """

    data: JSONAPIPrimaryData | None = None
    errors: list[JSONAPIError] | None = None
    meta: dict[str, Any] | None = None
    jsonapi: JSONAPIObject | None = None
    links: dict[str, Any] | None = None
    included: list[JSONAPIResource] | None = None

    @model_validator(mode="before")
    @classmethod
    def _data_xor_errors(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        has_data = "data" in values
        has_errors = "errors" in values
        if has_data and has_errors:
            raise ValueError('"data" and "errors" must not both be present')
        if not has_data and not has_errors:
            raise ValueError('one of "data" or "errors" is required')
        return values


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class Violation(BaseModel):
    """One violated constraint, located by a dotted path into the document."""

    path: str
    message: str


class DocumentValidationResult(BaseModel):
    """Outcome of validating a candidate document."""

    violations: list[Violation] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations


UNION_TAGS = {
    "data": frozenset({"resource", "identifier", "resources", "identifiers"}),
    "about": frozenset({"uri", "link-object"}),
}


def _format_loc(loc: tuple[int | str, ...]) -> str:
    # Drop the union member tags so paths point into the document itself.
    parts = [
        str(part)
        for index, part in enumerate(loc)
        if not (index and part in UNION_TAGS.get(str(loc[index - 1]), ()))
    ]
    return ".".join(parts) or ROOT_PATH


def validate_document(candidate: Any) -> DocumentValidationResult:
    """Check ``candidate`` against the JSON:API document shape.

    Accepts any value and never raises on malformed input.

    Args:
        candidate: The value to check, usually a ``dict`` about to be sent.

    Returns:
        A result whose ``violations`` is empty when the document conforms.
    """
    try:
        JSONAPIDocument.model_validate(candidate)
    except ValidationError as exc:
        violations = []
        for error in exc.errors():
            violation = Violation(path=_format_loc(error["loc"]), message=error["msg"])
            if violation not in violations:
                violations.append(violation)
        return DocumentValidationResult(violations=violations)
    return DocumentValidationResult()
