from typing import ClassVar

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from burgerapi.models.base import (
    AuditMixin,
    Base,
    IntegerPrimaryKeyMixin,
    JSONAPIModelMixin,
    SoftDeleteMixin,
)


class User(Base, IntegerPrimaryKeyMixin, AuditMixin, SoftDeleteMixin, JSONAPIModelMixin):
    """A person writing reviews."""

    __tablename__ = "users"
    __jsonapi_hidden__: ClassVar[tuple[str, ...]] = ("deleted_at", "password")

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    fullname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
