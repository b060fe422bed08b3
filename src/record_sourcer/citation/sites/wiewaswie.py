"""WieWasWie record citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.readers.wiewaswie import WiewaswieReader


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    reader = WiewaswieReader(ed)
    builder.source_title = reader.get_source_title()
    builder.source_reference = reader.get_source_reference()

    url = ed.get("url")
    if url:
        builder.record_link_or_template = f"[{url} WieWasWie Record]"

    external = reader.get_external_link()
    if external:
        link, text = external
        builder.image_link = f"[{link} {text}]"

    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
