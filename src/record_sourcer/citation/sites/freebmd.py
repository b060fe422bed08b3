"""FreeBMD index entry citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData

INDEX_TITLES = {
    "births": "England & Wales Birth Index",
    "marriages": "England & Wales Marriage Index",
    "deaths": "England & Wales Death Index",
}


def build_source_reference(gd: GeneralizedData) -> str:
    collection = gd.collection_data
    if collection is None:
        return ""
    parts = []
    if collection.volume:
        parts.append(f"Volume {collection.volume}")
    if collection.page:
        parts.append(f"Page {collection.page}")
    return " ".join(parts)


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    collection_id = gd.collection_data.id if gd.collection_data else ""
    builder.source_title = INDEX_TITLES.get(collection_id, "England & Wales Civil Registration Index")
    builder.source_reference = build_source_reference(gd)
    url = ed.get("citationUrl") or ed.get("url")
    if url:
        builder.record_link_or_template = f"[{url} FreeBMD Entry Information]"
    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
