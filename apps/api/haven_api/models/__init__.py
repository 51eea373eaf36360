"""Expose ORM models."""
from .property import ListingStatus, Property, PropertyType

__all__ = [
    "ListingStatus",
    "Property",
    "PropertyType",
]
