from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from burgerapi.models.base import (
    AuditMixin,
    Base,
    IntegerPrimaryKeyMixin,
    JSONAPIModelMixin,
    SoftDeleteMixin,
)


class Review(Base, IntegerPrimaryKeyMixin, AuditMixin, SoftDeleteMixin, JSONAPIModelMixin):
    """A user's review of one item."""

    __tablename__ = "reviews"

    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    body: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    reaction: Mapped[str] = mapped_column(String(255), nullable=False, default="")
