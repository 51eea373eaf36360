"""Property listing model."""
from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Enum, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PropertyType(str, enum.Enum):
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    CONDO = "CONDO"
    TOWNHOUSE = "TOWNHOUSE"
    STUDIO = "STUDIO"


class ListingStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SOLD = "SOLD"
    INACTIVE = "INACTIVE"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Property(Base):
    """A property listed on the marketplace."""

    __tablename__ = "properties"
    __table_args__ = (CheckConstraint("price >= 0", name="price_non_negative"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    city: Mapped[str] = mapped_column(String, nullable=False, index=True)
    state: Mapped[str | None] = mapped_column(String)
    country: Mapped[str] = mapped_column(String, default="USA", nullable=False)
    address: Mapped[str | None] = mapped_column(String)
    bedrooms: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[float | None] = mapped_column(Float)
    square_feet: Mapped[int | None] = mapped_column(Integer)
    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, name="property_type"), default=PropertyType.HOUSE, nullable=False
    )
    listing_status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, name="listing_status"), default=ListingStatus.ACTIVE, nullable=False, index=True
    )
    image_url: Mapped[str | None] = mapped_column(String)
    agent_id: Mapped[str | None] = mapped_column(String)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
