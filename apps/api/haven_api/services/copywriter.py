"""Generic listing-copy generator.

Each :class:`CopyTemplate` maps to a row in ``TEMPLATES`` describing which
payload fields are required, how the prompt is rendered and whether the model
is asked for JSON. :func:`generate` runs the same pipeline for every row:
credential check, required-field check, prompt rendering, one completion call,
and empty-output detection.
"""
from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic.alias_generators import to_camel

from ..core.config import settings
from . import prompts
from .fields import is_missing, required_message
from .llm import CompletionClient, has_api_key

logger = logging.getLogger(__name__)


class CopyTemplate(str, enum.Enum):
    LISTING_DESCRIPTION = "listing-description"
    INQUIRY_REPLY = "inquiry-reply"
    LISTING_MARKETING = "listing-marketing"


class CopyGenerationError(RuntimeError):
    """Base class for generator failures that map to a server error."""


class MissingCredentialError(CopyGenerationError):
    """Raised before any model call when no API key is configured."""


class EmptyOutputError(CopyGenerationError):
    """Raised when the model returns no usable text."""


class UpstreamError(CopyGenerationError):
    """Raised when the model call itself fails; the cause is logged, not exposed."""


class MissingFieldsError(ValueError):
    """Raised when required payload fields are absent."""

    def __init__(self, fields: list[str], purpose: str) -> None:
        self.fields = fields
        super().__init__(required_message([to_camel(name) for name in fields], purpose))


@dataclass(frozen=True, slots=True)
class TemplateSpec:
    required: tuple[str, ...]
    purpose: str
    label: str
    render: Callable[[Mapping[str, Any]], str]
    json_output: bool = False


TEMPLATES: dict[CopyTemplate, TemplateSpec] = {
    CopyTemplate.LISTING_DESCRIPTION: TemplateSpec(
        required=("city", "property_type", "price"),
        purpose="generate a description",
        label="listing description",
        render=prompts.render_listing_description,
    ),
    CopyTemplate.INQUIRY_REPLY: TemplateSpec(
        required=("property_title", "buyer_message"),
        purpose="generate a reply",
        label="inquiry reply",
        render=prompts.render_inquiry_reply,
    ),
    CopyTemplate.LISTING_MARKETING: TemplateSpec(
        required=("title", "city", "property_type"),
        purpose="generate marketing copy",
        label="marketing copy",
        render=prompts.render_listing_marketing,
        json_output=True,
    ),
}

CREDENTIAL_MESSAGE = "GEMINI_API_KEY is not configured on the server"


def missing_fields(template: CopyTemplate, payload: Mapping[str, Any]) -> list[str]:
    """Return required fields of ``template`` absent from ``payload``."""

    return [name for name in TEMPLATES[template].required if is_missing(payload.get(name))]


async def generate(template: CopyTemplate, payload: Mapping[str, Any], client: CompletionClient) -> str:
    """Render ``template`` with ``payload`` and return the model's stripped text."""

    entry = TEMPLATES[template]

    if not has_api_key():
        logger.error("Refusing to generate %s: GEMINI_API_KEY is not set", template.value)
        raise MissingCredentialError(CREDENTIAL_MESSAGE)

    absent = missing_fields(template, payload)
    if absent:
        raise MissingFieldsError(absent, entry.purpose)

    prompt = entry.render(payload)
    try:
        text = await client.complete(
            prompt,
            temperature=settings.gemini_temperature,
            json_output=entry.json_output,
        )
        text = (text or "").strip()
    except Exception as exc:  # noqa: BLE001 - any upstream failure becomes a generic 500
        logger.exception("Model call failed for %s", template.value)
        raise UpstreamError(f"Failed to generate {entry.label}") from exc

    if not text:
        logger.warning("Model returned empty output for %s", template.value)
        raise EmptyOutputError(f"Model returned an empty {entry.label}")
    return text


def parse_marketing(raw: str) -> tuple[list[str], str]:
    """Split a marketing response into highlights and caption.

    Text that is not a JSON object, or whose fields have the wrong types, is
    placed unchanged in both fields. Missing keys default to empty values.
    """

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Marketing response was not valid JSON; wrapping raw text")
        return [raw], raw

    if not isinstance(parsed, dict):
        logger.warning("Marketing response was JSON but not an object; wrapping raw text")
        return [raw], raw

    highlights = parsed.get("highlights")
    caption = parsed.get("caption")
    if highlights is not None and not (
        isinstance(highlights, list) and all(isinstance(item, str) for item in highlights)
    ):
        logger.warning("Marketing highlights were not a list of strings; wrapping raw text")
        return [raw], raw
    if caption is not None and not isinstance(caption, str):
        logger.warning("Marketing caption was not a string; wrapping raw text")
        return [raw], raw
    return highlights or [], caption or ""
