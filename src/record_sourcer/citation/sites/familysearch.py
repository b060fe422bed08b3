"""FamilySearch historical record citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.readers.gedcomx import GedcomxRecord


def build_source_reference(ed: Mapping[str, Any]) -> str:
    """The "citing ..." tail of FamilySearch's own citation, if any."""
    gedcomx = ed.get("gedcomx")
    if not gedcomx:
        return ""
    try:
        citation = GedcomxRecord.from_json(dict(gedcomx)).record_citation
    except ValidationError:
        return ""
    index = citation.find("citing ")
    if index == -1:
        return ""
    return citation[index + len("citing ") :].strip().rstrip(".")


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    builder.source_title = ed.get("collectionTitle") or "FamilySearch Historical Records"
    builder.source_reference = build_source_reference(ed)
    url = ed.get("url")
    if url:
        builder.record_link_or_template = f"[{url} FamilySearch Record]"
    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
