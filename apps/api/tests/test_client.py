"""Tests for the Python client and its in-memory catalog filter."""
from __future__ import annotations

import pytest
from httpx import ASGITransport

from haven_api.client import HavenClient, HavenClientError, ListingForm, filter_listings

LISTINGS = [
    {"title": "Pool house", "description": "Sunny", "city": "Austin", "state": "TX", "price": 500000, "propertyType": "HOUSE"},
    {"title": "Downtown condo", "description": "Near pool", "city": "North Austin", "state": None, "price": 300000, "propertyType": "CONDO"},
    {"title": "Loft", "description": "Brick walls", "city": "Houston", "state": "TX", "price": 250000, "propertyType": "STUDIO"},
]


def _titles(items) -> list[str]:
    return [item["title"] for item in items]


def test_filter_listings_without_criteria_returns_everything() -> None:
    assert _titles(filter_listings(LISTINGS)) == ["Pool house", "Downtown condo", "Loft"]


def test_filter_listings_by_keyword_and_city() -> None:
    assert _titles(filter_listings(LISTINGS, q="POOL")) == ["Pool house", "Downtown condo"]
    assert _titles(filter_listings(LISTINGS, city="austin")) == ["Pool house", "Downtown condo"]
    assert _titles(filter_listings(LISTINGS, q="tx", city="houston")) == ["Loft"]


def test_filter_listings_by_type_and_price() -> None:
    assert _titles(filter_listings(LISTINGS, property_type="CONDO")) == ["Downtown condo"]
    assert _titles(filter_listings(LISTINGS, property_type="ALL")) == ["Pool house", "Downtown condo", "Loft"]
    assert _titles(filter_listings(LISTINGS, min_price=260000, max_price=500000)) == ["Pool house", "Downtown condo"]


def _form(**overrides) -> ListingForm:
    values = dict(
        title="Craftsman with Garden",
        description="Three bedroom craftsman.",
        price=450000,
        city="Austin",
        bedrooms=3,
        bathrooms=2,
        property_type="HOUSE",
    )
    values.update(overrides)
    return ListingForm(**values)


@pytest.mark.asyncio
async def test_client_creates_and_lists(overrides) -> None:
    async with HavenClient("http://testserver", transport=ASGITransport(app=overrides)) as haven:
        created = await haven.create_property(_form(extra={"listingStatus": "PENDING"}))
        listings = await haven.list_properties(city="austin", type=None)
        fetched = await haven.get_property(created["id"])

    assert created["listingStatus"] == "ACTIVE"
    assert created["country"] == "USA"
    assert [item["id"] for item in listings] == [created["id"]]
    assert fetched["title"] == "Craftsman with Garden"


@pytest.mark.asyncio
async def test_client_surfaces_server_error_detail(overrides) -> None:
    async with HavenClient("http://testserver", transport=ASGITransport(app=overrides)) as haven:
        with pytest.raises(HavenClientError) as exc:
            await haven.create_property(_form(title=""))

    assert exc.value.status_code == 400
    assert str(exc.value) == "title is required"


@pytest.mark.asyncio
async def test_client_preflight_checks_skip_the_server(overrides, completion_client, api_key) -> None:
    async with HavenClient("http://testserver", transport=ASGITransport(app=overrides)) as haven:
        with pytest.raises(HavenClientError, match="city and price"):
            await haven.generate_description(_form(price=None))
        with pytest.raises(HavenClientError, match="Select a property"):
            await haven.generate_inquiry_reply(None, "Hello?")
        with pytest.raises(HavenClientError, match="buyer's message"):
            await haven.generate_inquiry_reply(LISTINGS[0], "   ")
        with pytest.raises(HavenClientError, match="Title and City"):
            await haven.generate_marketing(_form(title=""))

    assert completion_client.calls == []


@pytest.mark.asyncio
async def test_client_drives_generators(overrides, completion_client, api_key) -> None:
    async with HavenClient("http://testserver", transport=ASGITransport(app=overrides)) as haven:
        completion_client.response = "Lovely home."
        description = await haven.generate_description(_form(), notes="new roof")

        completion_client.response = "Happy to help."
        reply = await haven.generate_inquiry_reply(LISTINGS[0], "Is it still available?")

        completion_client.response = '{"highlights": ["Pool"], "caption": "Dive in."}'
        highlights, caption = await haven.generate_marketing(_form())

    assert description == "Lovely home."
    assert reply == "Happy to help."
    assert (highlights, caption) == (["Pool"], "Dive in.")
    assert "- Agent notes: Sunny" in completion_client.calls[1]["prompt"]
    assert "- Extra notes from the agent: new roof" in completion_client.calls[0]["prompt"]
