"""Offset-based pagination models.

``PageParams`` is read from the ``page``/``size`` query parameters of a
list request; ``PaginationContext`` is built from it once the total count
of matching records is known and is handed to the JSON:API formatter,
which derives the ``total-count``, ``current-page`` and ``total-pages``
meta members from it.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE = 999999
MAX_PAGE_SIZE = 100


class PageParams(BaseModel):
    """The page requested by the client."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def with_count(self, count: int) -> PaginationContext:
        """Bind the total number of matching records to this page."""
        return PaginationContext(count=count, limit=self.limit, offset=self.offset)


class PaginationContext(BaseModel):
    """Counters describing one page of a larger result set."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    limit: int = Field(ge=1)
    offset: int = Field(ge=0)

    @property
    def current_page(self) -> int:
        # Offsets that are not a multiple of the limit fall on the page
        # holding the first returned record.
        return self.offset // self.limit + 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.limit)

    def to_meta(self) -> dict[str, int]:
        """Render the counters as JSON:API meta members."""
        return {
            "total-count": self.count,
            "current-page": self.current_page,
            "total-pages": self.total_pages,
        }
