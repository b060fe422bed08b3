"""New Zealand Births, Deaths & Marriages Online citations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.models.record_type import RecordType

SEARCH_URL = "https://www.bdmhistoricalrecords.dia.govt.nz/search"

REGISTRATION_KINDS = {
    RecordType.BIRTH_REGISTRATION: "Birth ",
    RecordType.DEATH_REGISTRATION: "Death ",
    RecordType.MARRIAGE_REGISTRATION: "Marriage ",
}


def build_source_reference(ed: Mapping[str, Any], gd: GeneralizedData) -> str:
    registration_number = (ed.get("recordData") or {}).get("Registration Number")
    if not registration_number:
        return ""
    kind = REGISTRATION_KINDS.get(gd.record_type, "")
    return f"{kind}Registration Number: {registration_number}"


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    builder.source_title = "New Zealand Births, Deaths & Marriages Online"
    builder.source_reference = build_source_reference(ed, gd)
    builder.record_link_or_template = f"[{SEARCH_URL} New Zealand BDM Online]"
    builder.add_standard_data_string(gd)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
