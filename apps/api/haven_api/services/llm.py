"""Completion client built on Gemini."""
from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Dict, Protocol

import google.generativeai as genai

from ..core.config import settings

logger = logging.getLogger(__name__)


class LLMUnavailableError(RuntimeError):
    """Raised when the Gemini credential is not configured."""


class CompletionClient(Protocol):
    """Narrow interface the copy generator depends on."""

    async def complete(self, prompt: str, *, temperature: float, json_output: bool = False) -> str:
        ...


def has_api_key() -> bool:
    return bool(settings.gemini_api_key.strip())


@lru_cache
def _configured_api() -> bool:
    """Configure the Google Generative AI client once."""

    if not has_api_key():
        raise LLMUnavailableError("GEMINI_API_KEY is missing")

    genai.configure(api_key=settings.gemini_api_key)
    return True


class GeminiCompletionClient:
    """Send a single user prompt to a Gemini model and return the first candidate's text."""

    def __init__(self, model_name: str | None = None) -> None:
        self.model_name = (model_name or settings.gemini_model).strip()
        self._models: Dict[str, genai.GenerativeModel] = {}

    def _get_model(self) -> genai.GenerativeModel:
        """Return a cached Gemini model instance."""

        _configured_api()
        if not self.model_name:
            raise RuntimeError("Gemini model name was empty")

        if self.model_name not in self._models:
            self._models[self.model_name] = genai.GenerativeModel(self.model_name)
        return self._models[self.model_name]

    async def complete(self, prompt: str, *, temperature: float, json_output: bool = False) -> str:
        loop = asyncio.get_running_loop()
        config = genai.GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json" if json_output else "text/plain",
        )

        def _run_inference() -> str:
            response = self._get_model().generate_content(prompt, generation_config=config)
            text = getattr(response, "text", "") or ""
            return text.strip()

        text = await loop.run_in_executor(None, _run_inference)
        logger.debug("Gemini %s returned %d characters", self.model_name, len(text))
        return text


@lru_cache
def get_completion_client() -> CompletionClient:
    """FastAPI dependency returning the shared completion client."""

    return GeminiCompletionClient()
