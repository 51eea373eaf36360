"""Listing catalog endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import properties as schemas
from ..services import properties as properties_service

router = APIRouter()


@router.get("", response_model=list[schemas.PropertyOut])
async def list_properties(
    city: str | None = None,
    q: str | None = None,
    type: str | None = None,
    status_: str | None = Query(default=None, alias="status"),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.PropertyOut]:
    """Return listings matching the filters, newest first. Defaults to ACTIVE listings."""

    query = schemas.PropertyQuery(
        city=city, q=q, type=type, status=status_, min_price=min_price, max_price=max_price
    )
    rows = await properties_service.list_properties(query, session)
    return [schemas.PropertyOut.model_validate(row) for row in rows]


@router.post("", response_model=schemas.PropertyOut, status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: schemas.PropertyCreateRequest,
    session: AsyncSession = Depends(get_session),
) -> schemas.PropertyOut:
    """Create a new ACTIVE listing."""

    listing = await properties_service.create_property(payload, session)
    return schemas.PropertyOut.model_validate(listing)


@router.get("/{property_id}", response_model=schemas.PropertyOut)
async def get_property(
    property_id: str,
    session: AsyncSession = Depends(get_session),
) -> schemas.PropertyOut:
    """Return a single listing."""

    listing = await properties_service.get_property(property_id, session)
    return schemas.PropertyOut.model_validate(listing)
