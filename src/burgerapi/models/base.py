from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime, Integer, func, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class IntegerPrimaryKeyMixin:
    """Mixin providing an auto-incrementing integer primary key column."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class AuditMixin:
    """Mixin providing created_at and updated_at audit columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Mixin providing a deleted_at column; rows with a value are treated as gone."""

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class JSONAPIModelMixin:
    """Mixin describing how a model is exposed as a JSON:API resource.

    The resource type defaults to the table name. Attributes are every mapped
    column except the primary key and the names listed in
    ``__jsonapi_hidden__``.
    """

    __jsonapi_hidden__: ClassVar[tuple[str, ...]] = ("deleted_at",)

    @classmethod
    def jsonapi_type(cls) -> str:
        return getattr(cls, "__jsonapi_type__", None) or cls.__tablename__

    @classmethod
    def jsonapi_attributes(cls) -> list[str]:
        mapper = inspect(cls)
        primary_keys = {column.key for column in mapper.primary_key}
        return [
            attr.key
            for attr in mapper.column_attrs
            if attr.key not in primary_keys and attr.key not in cls.__jsonapi_hidden__
        ]
