from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from burgerapi.models.base import (
    AuditMixin,
    Base,
    IntegerPrimaryKeyMixin,
    JSONAPIModelMixin,
    SoftDeleteMixin,
)


class Item(Base, IntegerPrimaryKeyMixin, AuditMixin, SoftDeleteMixin, JSONAPIModelMixin):
    """A burger on the menu of a place."""

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    place_id: Mapped[int] = mapped_column(ForeignKey("places.id"), nullable=False)
