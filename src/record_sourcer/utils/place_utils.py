"""Place string cleanup."""

from __future__ import annotations

import re


def normalize_place_string(place: str) -> str:
    """Tidy a place string: collapse whitespace and standardize comma spacing.

    Empty parts left by doubled commas are dropped, so
    "Kensington ,, London,England" becomes "Kensington, London, England".
    """
    if not place:
        return ""

    result = " ".join(place.split())
    result = re.sub(r"\s*,\s*", ", ", result)
    parts = [part for part in result.split(", ") if part.strip(" ,")]
    return ", ".join(part.strip(" ,") for part in parts)


def split_place_string(place: str) -> list[str]:
    """Split a normalized place string into its comma separated parts."""
    normalized = normalize_place_string(place)
    return normalized.split(", ") if normalized else []
