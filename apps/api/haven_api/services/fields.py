"""Helpers for required-field checks shared by the services."""
from __future__ import annotations

from typing import Any, Iterable


def is_missing(value: Any) -> bool:
    """Absent, null and blank strings all count as missing."""

    return value is None or (isinstance(value, str) and not value.strip())


def required_message(names: Iterable[str], purpose: str | None = None) -> str:
    """Build e.g. ``"title, city, and propertyType are required"``."""

    names = list(names)
    if len(names) == 1:
        joined = names[0]
    elif len(names) == 2:
        joined = f"{names[0]} and {names[1]}"
    else:
        joined = ", ".join(names[:-1]) + f", and {names[-1]}"

    message = f"{joined} {'is' if len(names) == 1 else 'are'} required"
    if purpose:
        message += f" to {purpose}"
    return message
