"""Schemas for the AI copywriting endpoints."""
from __future__ import annotations

from pydantic import Field

from .properties import CamelModel


class ListingDescriptionRequest(CamelModel):
    city: str | None = None
    property_type: str | None = None
    price: float | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    notes: str | None = None


class ListingDescriptionResponse(CamelModel):
    description: str


class InquiryReplyRequest(CamelModel):
    property_title: str | None = None
    buyer_message: str | None = None
    city: str | None = None
    price: float | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    agent_notes: str | None = None


class InquiryReplyResponse(CamelModel):
    reply: str


class ListingMarketingRequest(CamelModel):
    title: str | None = None
    city: str | None = None
    property_type: str | None = None
    price: float | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    notes: str | None = None


class ListingMarketingResponse(CamelModel):
    highlights: list[str] = Field(default_factory=list)
    caption: str = ""
