"""HTTP client for the listings API, mirroring what the web front end does.

The catalog is fetched once and filtered in memory with :func:`filter_listings`;
the generator helpers perform the same pre-flight checks as the listing form
before calling the server.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import httpx

logger = logging.getLogger(__name__)

ALL_TYPES = "ALL"


class HavenClientError(RuntimeError):
    """Raised for failed requests and failed pre-flight checks."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class ListingForm:
    """Listing creation form state."""

    title: str = ""
    description: str = ""
    price: float | None = None
    city: str = ""
    state: str = ""
    country: str = "USA"
    address: str = ""
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_feet: int | None = None
    property_type: str = "HOUSE"
    image_url: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "city": self.city,
            "state": self.state or None,
            "country": self.country or "USA",
            "address": self.address or None,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "squareFeet": self.square_feet,
            "propertyType": self.property_type,
            "imageUrl": self.image_url or None,
        }
        payload.update(self.extra)
        return payload


def filter_listings(
    listings: Iterable[Mapping[str, Any]],
    *,
    q: str | None = None,
    city: str | None = None,
    property_type: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[Mapping[str, Any]]:
    """Filter already-fetched listings the way the catalog grid does."""

    needle = q.lower() if q else None
    city_needle = city.lower() if city else None
    results = []
    for listing in listings:
        if property_type and property_type != ALL_TYPES and listing.get("propertyType") != property_type:
            continue
        if needle:
            haystack = " ".join(
                str(listing.get(key) or "") for key in ("title", "description", "city", "state")
            ).lower()
            if needle not in haystack:
                continue
        if city_needle and city_needle not in str(listing.get("city") or "").lower():
            continue
        price = listing.get("price") or 0
        if min_price is not None and price < min_price:
            continue
        if max_price is not None and price > max_price:
            continue
        results.append(listing)
    return results


class HavenClient:
    """Async client for the listings and copywriting endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "HavenClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, url, **kwargs)
        if response.is_success:
            return response.json()

        try:
            message = response.json().get("detail")
        except ValueError:
            message = None
        logger.warning("%s %s failed with %s", method, url, response.status_code)
        raise HavenClientError(message or f"Request failed ({response.status_code})", response.status_code)

    async def list_properties(self, **params: Any) -> list[dict[str, Any]]:
        query = {key: value for key, value in params.items() if value is not None}
        return await self._request("GET", "/properties", params=query)

    async def get_property(self, property_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/properties/{property_id}")

    async def create_property(self, form: ListingForm) -> dict[str, Any]:
        return await self._request("POST", "/properties", json=form.to_payload())

    async def generate_description(self, form: ListingForm, notes: str = "") -> str:
        if not form.city or not form.price:
            raise HavenClientError("Add at least a city and price before generating a description.")

        data = await self._request(
            "POST",
            "/ai/listing-description",
            json={
                "city": form.city,
                "propertyType": form.property_type,
                "bedrooms": form.bedrooms or None,
                "bathrooms": form.bathrooms or None,
                "price": form.price,
                "notes": notes,
            },
        )
        return data["description"]

    async def generate_inquiry_reply(self, listing: Mapping[str, Any] | None, buyer_message: str) -> str:
        if listing is None:
            raise HavenClientError("Select a property before generating a reply.")
        if not buyer_message.strip():
            raise HavenClientError("Paste the buyer's message before generating a reply.")

        data = await self._request(
            "POST",
            "/ai/inquiry-reply",
            json={
                "propertyTitle": listing.get("title"),
                "city": listing.get("city"),
                "price": listing.get("price"),
                "bedrooms": listing.get("bedrooms"),
                "bathrooms": listing.get("bathrooms"),
                "agentNotes": listing.get("description"),
                "buyerMessage": buyer_message,
            },
        )
        return data["reply"]

    async def generate_marketing(self, form: ListingForm, notes: str = "") -> tuple[list[str], str]:
        if not form.title or not form.city:
            raise HavenClientError("Please fill at least Title and City before using AI.")

        body: dict[str, Any] = {
            "title": form.title,
            "city": form.city,
            "propertyType": form.property_type,
            "notes": notes,
        }
        if form.price:
            body["price"] = form.price
        if form.bedrooms is not None:
            body["bedrooms"] = form.bedrooms
        if form.bathrooms is not None:
            body["bathrooms"] = form.bathrooms

        data = await self._request("POST", "/ai/listing-marketing", json=body)
        return list(data.get("highlights") or []), data.get("caption") or ""
