from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from burgerapi.models.base import (
    AuditMixin,
    Base,
    IntegerPrimaryKeyMixin,
    JSONAPIModelMixin,
    SoftDeleteMixin,
)


class Place(Base, IntegerPrimaryKeyMixin, AuditMixin, SoftDeleteMixin, JSONAPIModelMixin):
    """A restaurant serving the burgers that users review."""

    __tablename__ = "places"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    picture: Mapped[str | None] = mapped_column(String(255), nullable=True)
