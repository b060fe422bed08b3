from __future__ import annotations

import json
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


def _f(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except Exception:
        return default


def _i(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except Exception:
        return default


@dataclass(frozen=True)
class Settings:
    # Prefetch polling: fixed delay between checks and a maximum check count
    prefetch_max_attempts: int = _i("SOURCER_PREFETCH_MAX_ATTEMPTS", 100)
    prefetch_delay: float = _f("SOURCER_PREFETCH_DELAY", 0.1)

    # Seconds before a record fetch is abandoned
    http_timeout: float = _f("SOURCER_HTTP_TIMEOUT", 30.0)


CONFIG = Settings()


# Citation options. Each key maps to (default, allowed values or None for free-form).
OPTION_DEFINITIONS: dict[str, tuple[Any, tuple[Any, ...] | None]] = {
    # General citation layout
    "citation_general_meaningfulNames": ("bold", ("none", "bold", "italic", "plain")),
    "citation_general_addAccessedDate": ("parenAfterLink", ("none", "parenAfterLink", "afterLink")),
    "citation_general_dateFormat": ("long", ("long", "short", "iso")),
    "citation_general_sourceReferenceSeparator": ("commaSpace", ("commaSpace", "semicolonSpace", "colonSpace")),
    "citation_general_addBreaksWithinBody": (True, (True, False)),
    "citation_general_addNewlinesWithinRefs": (True, (True, False)),
    "citation_general_addNewlinesWithinBody": (False, (True, False)),
    "citation_general_dataStringIndented": (False, (True, False)),
    # Wikipedia
    "citation_wikipedia_citationLinkType": (
        "permalink",
        ("permalink", "plainPermalink", "external", "special", "plainSimple"),
    ),
    "citation_wikipedia_citationLinkLocation": (
        "reference",
        ("title", "reference", "afterWikipedia", "afterWikipediaEntry"),
    ),
    "citation_wikipedia_citationUseItalics": (True, (True, False)),
    # FamilySearch "build all citations"
    "addMerge_fsAllCitations_citationType": (
        "narrative",
        ("fsPlainInline", "fsPlainSource", "narrative", "inline", "source"),
    ),
    # Narrative
    "narrative_general_nameOrPronoun": ("fullName", ("fullName", "firstName", "pronoun")),
    # Household table
    "table_general_autoGenerate": (
        "none",
        ("none", "citationInTableCaption", "afterRef", "withinRefOrSource"),
    ),
    "table_general_format": ("withBorders", ("withBorders", "table", "list")),
    "table_general_caption": ("titleWithDate", ("none", "title", "titleWithDate")),
}


def get_default_options() -> dict[str, Any]:
    """Return a fresh dict of every recognized option set to its default."""
    return {key: default for key, (default, _) in OPTION_DEFINITIONS.items()}


class Options(Mapping[str, Any]):
    """Read-only view over user options that falls back to documented defaults.

    A key that is missing, or whose value is not one of the allowed values,
    reads as its default. Keys that are not recognized at all read as None
    through ``get`` and are kept so that site code can still see them.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        definition = OPTION_DEFINITIONS.get(key)
        if definition is None:
            if key in self._values:
                return self._values[key]
            raise KeyError(key)
        default, allowed = definition
        value = self._values.get(key, default)
        if allowed is not None and value not in allowed:
            return default
        return value

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def __iter__(self) -> Iterator[str]:
        keys = list(OPTION_DEFINITIONS)
        keys.extend(k for k in self._values if k not in OPTION_DEFINITIONS)
        return iter(keys)

    def __len__(self) -> int:
        return len(list(iter(self)))

    def with_overrides(self, **overrides: Any) -> Options:
        merged = dict(self._values)
        merged.update(overrides)
        return Options(merged)

    @classmethod
    def from_file(cls, path: Path) -> Options:
        """Load options from a JSON file holding a flat object."""
        data = json.loads(path.read_text())
        if not isinstance(data, dict):
            raise ValueError(f"options file {path} must hold a JSON object")
        return cls(data)
