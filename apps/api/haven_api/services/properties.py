"""Business logic for listing queries and creation."""
from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..models.property import ListingStatus, Property, PropertyType
from ..repositories import properties as properties_repo
from ..schemas import properties as schemas
from .fields import is_missing, required_message

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("title", "title"),
    ("description", "description"),
    ("price", "price"),
    ("city", "city"),
    ("property_type", "propertyType"),
)


def _parse_enum(enum_cls: type, raw: str | None) -> Any:
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        return None


def _parse_bound(raw: str | None) -> float | None:
    if is_missing(raw):
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def build_filter(query: schemas.PropertyQuery) -> properties_repo.PropertyFilter:
    """Translate raw query parameters into a listing filter.

    Unrecognised ``type`` values are dropped and unrecognised ``status`` values
    fall back to ACTIVE, so a bad parameter widens rather than fails the query.
    """

    return properties_repo.PropertyFilter(
        status=_parse_enum(ListingStatus, query.status) or ListingStatus.ACTIVE,
        city=query.city or None,
        keyword=query.q or None,
        property_type=_parse_enum(PropertyType, query.type),
        min_price=_parse_bound(query.min_price),
        max_price=_parse_bound(query.max_price),
    )


async def list_properties(query: schemas.PropertyQuery, session: AsyncSession) -> list[Property]:
    """Return listings matching the query, newest first."""

    filters = build_filter(query)
    try:
        return await properties_repo.find(session, filters)
    except SQLAlchemyError:
        logger.exception("Listing query failed for %s", filters)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch properties"
        ) from None


async def get_property(property_id: str, session: AsyncSession) -> Property:
    """Return one listing or raise 404."""

    try:
        listing = await properties_repo.get_by_id(session, property_id)
    except SQLAlchemyError:
        logger.exception("Listing lookup failed for %s", property_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch property"
        ) from None

    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return listing


def _coerce_number(name: str, value: Any, *, integer: bool = False) -> float | int | None:
    if is_missing(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"{name} must be a number"
        ) from None
    if not math.isfinite(number) or number < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"{name} must be a non-negative number"
        )
    if integer:
        if not number.is_integer():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=f"{name} must be a whole number"
            )
        return int(number)
    return number


def _optional_text(value: str | None) -> str | None:
    return None if is_missing(value) else value


async def create_property(payload: schemas.PropertyCreateRequest, session: AsyncSession) -> Property:
    """Validate a creation payload and persist it as an ACTIVE listing.

    Any ``listingStatus`` supplied by the caller is ignored.
    """

    missing = [label for attr, label in REQUIRED_FIELDS if is_missing(getattr(payload, attr))]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=required_message(missing),
        )

    property_type = _parse_enum(PropertyType, payload.property_type)
    if property_type is None:
        allowed = ", ".join(member.value for member in PropertyType)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"propertyType must be one of {allowed}",
        )

    price = _coerce_number("price", payload.price)
    bedrooms = _coerce_number("bedrooms", payload.bedrooms, integer=True)
    bathrooms = _coerce_number("bathrooms", payload.bathrooms)
    square_feet = _coerce_number("squareFeet", payload.square_feet, integer=True)

    try:
        async with session.begin():
            listing = await properties_repo.create(
                session,
                title=payload.title,
                description=payload.description,
                price=price,
                city=payload.city,
                property_type=property_type,
                country=_optional_text(payload.country) or settings.default_country,
                state=_optional_text(payload.state),
                address=_optional_text(payload.address),
                bedrooms=bedrooms,
                bathrooms=bathrooms,
                square_feet=square_feet,
                image_url=_optional_text(payload.image_url),
                agent_id=_optional_text(payload.agent_id),
            )
    except SQLAlchemyError:
        logger.exception("Failed to create property %r", payload.title)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create property"
        ) from None

    logger.info("Created property %s in %s", listing.id, listing.city)
    return listing
