"""Data access helpers for property listings."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import uuid4

from sqlalchemy import Select, String, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.property import ListingStatus, Property, PropertyType


@dataclass(slots=True, frozen=True)
class PropertyFilter:
    """Listing search criteria.

    ``status`` is always set; callers resolve the ACTIVE default before
    building the filter.
    """

    status: ListingStatus = ListingStatus.ACTIVE
    city: str | None = None
    keyword: str | None = None
    property_type: PropertyType | None = None
    min_price: float | None = None
    max_price: float | None = None


def _contains(column: Any, needle: str) -> Any:
    return func.lower(column, type_=String).contains(needle.lower(), autoescape=True)


def _apply_filter(stmt: Select[tuple[Property]], filters: PropertyFilter) -> Select[tuple[Property]]:
    stmt = stmt.where(Property.listing_status == filters.status)

    if filters.city:
        stmt = stmt.where(_contains(Property.city, filters.city))

    if filters.keyword:
        stmt = stmt.where(
            or_(
                _contains(Property.title, filters.keyword),
                _contains(Property.description, filters.keyword),
                _contains(Property.city, filters.keyword),
                _contains(Property.state, filters.keyword),
            )
        )

    if filters.property_type is not None:
        stmt = stmt.where(Property.property_type == filters.property_type)
    if filters.min_price is not None:
        stmt = stmt.where(Property.price >= filters.min_price)
    if filters.max_price is not None:
        stmt = stmt.where(Property.price <= filters.max_price)
    return stmt


async def find(session: AsyncSession, filters: PropertyFilter) -> list[Property]:
    """Return listings matching ``filters``, newest first."""

    stmt = _apply_filter(select(Property), filters)
    stmt = stmt.order_by(Property.created_at.desc(), Property.id.desc())

    rows: Sequence[Property] = (await session.execute(stmt)).scalars().all()
    return list(rows)


async def get_by_id(session: AsyncSession, property_id: str) -> Property | None:
    """Return a listing by identifier."""

    stmt: Select[tuple[Property]] = select(Property).where(Property.id == property_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def create(
    session: AsyncSession,
    *,
    title: str,
    description: str,
    price: float,
    city: str,
    property_type: PropertyType,
    country: str,
    state: str | None = None,
    address: str | None = None,
    bedrooms: int | None = None,
    bathrooms: float | None = None,
    square_feet: int | None = None,
    image_url: str | None = None,
    agent_id: str | None = None,
) -> Property:
    """Insert a new ACTIVE listing and flush it so defaults are populated."""

    listing = Property(
        id=str(uuid4()),
        title=title,
        description=description,
        price=price,
        city=city,
        state=state,
        country=country,
        address=address,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        square_feet=square_feet,
        property_type=property_type,
        listing_status=ListingStatus.ACTIVE,
        image_url=image_url,
        agent_id=agent_id,
        created_at=datetime.now(timezone.utc),
    )
    session.add(listing)
    await session.flush()
    return listing
