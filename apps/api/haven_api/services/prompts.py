"""Prompt templates for listing copy generation."""
from __future__ import annotations

from typing import Any, Mapping

LISTING_DESCRIPTION_PROMPT = """\
You are an expert real estate copywriter.

Write a polished, compelling property listing description based on this info:

- City: {city}
- Property type: {property_type}
- Bedrooms: {bedrooms}
- Bathrooms: {bathrooms}
- Price: {price}
- Extra notes from the agent: {notes}

Guidelines:
- 2-3 short paragraphs.
- Make it warm and exciting but not cheesy.
- Highlight neighborhood/location plus key interior features.
- Avoid making up specific addresses or HOA details.
- Do NOT include contact info or calls to action like "Call today".
Return only the description text, no headings or markdown."""

INQUIRY_REPLY_PROMPT = """\
You are a friendly, professional real estate agent.

Write a concise email reply to a prospective buyer who inquired about a property.

Property info:
- Title: {property_title}
- City: {city}
- Price: {price}
- Bedrooms: {bedrooms}
- Bathrooms: {bathrooms}
- Agent notes: {agent_notes}

Buyer message:
"{buyer_message}"

Guidelines:
- Warm, helpful, and professional tone.
- Briefly restate key property details relevant to their question.
- Invite them to the next step (e.g., schedule a showing or ask follow-up questions),
  but do NOT include phone numbers or personal contact info.
- Do NOT make up specific dates/times; keep it general.
Return only the email body text, no greeting like "Dear [Name]" and no signature."""

LISTING_MARKETING_PROMPT = """\
You are a real estate marketing copywriter.

Generate:
1) 3-6 short bullet-point highlights for this property
2) A single social media caption

Property details:
- Title: {title}
- City: {city}
- Type: {property_type}
- Price: {price}
- Bedrooms: {bedrooms}
- Bathrooms: {bathrooms}
- Extra notes from agent: {notes}

Requirements:
- Highlights: punchy, benefit-focused, no more than 80 characters each.
- Caption: 1-3 sentences, emoji allowed but not required, include a subtle CTA.
- Do NOT include phone numbers, emails, or URLs.

Return ONLY valid JSON in this shape:
{{
  "highlights": ["bullet 1", "bullet 2", ...],
  "caption": "social caption text"
}}"""


def format_price(value: Any, *, missing: str = "Not specified") -> str:
    """Render a price as ``$1,234,567``; zero and absent prices use ``missing``."""

    if not value:
        return missing
    number = float(value)
    if number.is_integer():
        return f"${int(number):,}"
    return f"${number:,.2f}"


def _count(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _notes(value: Any) -> str:
    return value if value else "None"


def render_listing_description(payload: Mapping[str, Any]) -> str:
    return LISTING_DESCRIPTION_PROMPT.format(
        city=payload["city"],
        property_type=payload["property_type"],
        bedrooms=_count(payload.get("bedrooms")),
        bathrooms=_count(payload.get("bathrooms")),
        price=format_price(payload.get("price"), missing="$0"),
        notes=_notes(payload.get("notes")),
    )


def render_inquiry_reply(payload: Mapping[str, Any]) -> str:
    return INQUIRY_REPLY_PROMPT.format(
        property_title=payload["property_title"],
        city=payload.get("city") or "N/A",
        price=format_price(payload.get("price")),
        bedrooms=_count(payload.get("bedrooms")),
        bathrooms=_count(payload.get("bathrooms")),
        agent_notes=_notes(payload.get("agent_notes")),
        buyer_message=payload["buyer_message"],
    )


def render_listing_marketing(payload: Mapping[str, Any]) -> str:
    return LISTING_MARKETING_PROMPT.format(
        title=payload["title"],
        city=payload["city"],
        property_type=payload["property_type"],
        price=format_price(payload.get("price")),
        bedrooms=_count(payload.get("bedrooms")),
        bathrooms=_count(payload.get("bathrooms")),
        notes=_notes(payload.get("notes")),
    )
