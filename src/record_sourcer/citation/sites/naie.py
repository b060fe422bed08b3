"""National Archives of Ireland census citations."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData

IMAGE_HOST = "http://www.census.nationalarchives.ie"


def build_source_title(gd: GeneralizedData) -> str:
    year = gd.infer_event_year()
    return f"{year} Census of Ireland" if year else "Census of Ireland"


def build_source_reference(ed: Mapping[str, Any]) -> str:
    reference = "The National Archives of Ireland"
    heading = ed.get("heading")
    if heading:
        reference += ", " + re.sub(r"\s+", " ", heading).strip()
    return reference


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    builder.source_title = build_source_title(gd)
    builder.source_reference = build_source_reference(ed)
    if ed.get("url"):
        builder.record_link_or_template = f"[{ed['url']} National Archives of Ireland Record]"

    image_link = ed.get("imageLink")
    if image_link:
        if not image_link.startswith("http"):
            image_link = IMAGE_HOST + image_link
        builder.image_link = f"[{image_link} National Archives of Ireland Image]"

    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
