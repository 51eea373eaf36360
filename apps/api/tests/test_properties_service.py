"""Service-level tests for listing filter construction."""
from __future__ import annotations

import pytest
from fastapi import HTTPException

from haven_api.models.property import ListingStatus, PropertyType
from haven_api.schemas import properties as schemas
from haven_api.services import properties as properties_service


def test_build_filter_defaults_to_active() -> None:
    filters = properties_service.build_filter(schemas.PropertyQuery())

    assert filters.status is ListingStatus.ACTIVE
    assert filters.city is None
    assert filters.keyword is None
    assert filters.property_type is None


def test_build_filter_ignores_unknown_enum_values() -> None:
    filters = properties_service.build_filter(schemas.PropertyQuery(type="FOO", status="ARCHIVED"))

    assert filters.property_type is None
    assert filters.status is ListingStatus.ACTIVE


def test_build_filter_accepts_known_values() -> None:
    filters = properties_service.build_filter(
        schemas.PropertyQuery(city="Austin", q="pool", type="CONDO", status="SOLD", min_price="100", max_price="2e5")
    )

    assert filters.city == "Austin"
    assert filters.keyword == "pool"
    assert filters.property_type is PropertyType.CONDO
    assert filters.status is ListingStatus.SOLD
    assert filters.min_price == 100.0
    assert filters.max_price == 200000.0


def test_build_filter_drops_unparseable_prices() -> None:
    filters = properties_service.build_filter(schemas.PropertyQuery(min_price="cheap", max_price="nan"))

    assert filters.min_price is None
    assert filters.max_price is None


@pytest.mark.asyncio
async def test_create_property_validation_happens_before_store(monkeypatch) -> None:
    class _ExplodingSession:
        def begin(self):
            raise AssertionError("store must not be touched")

    payload = schemas.PropertyCreateRequest(description="d", price=1, city="c", property_type="HOUSE")

    with pytest.raises(HTTPException) as exc:
        await properties_service.create_property(payload, _ExplodingSession())

    assert exc.value.status_code == 400
    assert exc.value.detail == "title is required"
