"""MyHeritage record and profile citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.models.record_type import SourceType


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    if gd.source_type == SourceType.PROFILE:
        builder.source_title = "MyHeritage Family Trees"
        link_text = "MyHeritage Profile"
    else:
        builder.source_title = ed.get("collectionTitle") or "MyHeritage"
        link_text = "MyHeritage Record"

    url = ed.get("url")
    if url:
        builder.record_link_or_template = f"[{url} {link_text}]"
    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
