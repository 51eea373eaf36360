"""Schemas for listing endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.property import ListingStatus, PropertyType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyCreateRequest(CamelModel):
    """Raw creation payload; presence and numeric checks happen in the service."""

    title: str | None = None
    description: str | None = None
    price: float | str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    address: str | None = None
    bedrooms: int | float | str | None = None
    bathrooms: float | str | None = None
    square_feet: int | float | str | None = None
    property_type: str | None = None
    listing_status: str | None = None
    image_url: str | None = None
    agent_id: str | None = None


class PropertyOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: str
    price: float
    city: str
    state: str | None = None
    country: str
    address: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_feet: int | None = None
    property_type: PropertyType
    listing_status: ListingStatus
    image_url: str | None = None
    agent_id: str | None = None
    created_at: datetime


class PropertyQuery(CamelModel):
    """Query-string parameters as received; unknown enum values are tolerated."""

    city: str | None = None
    q: str | None = None
    type: str | None = None
    status: str | None = None
    min_price: str | None = Field(default=None)
    max_price: str | None = Field(default=None)
