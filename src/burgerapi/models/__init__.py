from burgerapi.models.base import (
    AuditMixin,
    Base,
    IntegerPrimaryKeyMixin,
    JSONAPIModelMixin,
    SoftDeleteMixin,
)
from burgerapi.models.item import Item
from burgerapi.models.place import Place
from burgerapi.models.review import Review
from burgerapi.models.user import User

__all__ = [
    "Base",
    "IntegerPrimaryKeyMixin",
    "AuditMixin",
    "SoftDeleteMixin",
    "JSONAPIModelMixin",
    "Item",
    "Place",
    "Review",
    "User",
]
