"""Household tables for census-like records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationResult, CitationType
from record_sourcer.config import Options
from record_sourcer.models.generalized import GeneralizedData, HouseholdMember

FIELD_HEADINGS = {
    "name": "Name",
    "forenames": "First Names",
    "lastName": "Last Name",
    "relationship": "Relation",
    "maritalStatus": "Status",
    "gender": "Gender",
    "age": "Age",
    "birthDate": "Birth Date",
    "birthYear": "Birth Year",
    "birthPlace": "Birth Place",
    "occupation": "Occupation",
    "profession": "Occupation",
}

TABLE_OPENINGS = {
    "withBorders": '{| border="1" cellpadding="4"',
    "table": "{|",
}

CITATION_PLACEMENTS = {"afterRef", "withinRefOrSource"}


def does_citation_want_household_table(
    citation_type: CitationType | str, gd: GeneralizedData, options: Mapping[str, Any]
) -> bool:
    """True when a citation of this type should carry the household table."""
    if not gd.has_household_table():
        return False
    return options.get("table_general_autoGenerate") in CITATION_PLACEMENTS


def heading_for_field(field_name: str) -> str:
    return FIELD_HEADINGS.get(field_name, field_name[:1].upper() + field_name[1:])


def build_caption(gd: GeneralizedData, options: Mapping[str, Any]) -> str:
    caption_option = options.get("table_general_caption")
    if caption_option == "none":
        return ""
    caption = "Household Members"
    if caption_option == "titleWithDate":
        event_date = gd.infer_event_date()
        if event_date:
            caption += f" in {event_date}"
    return caption


def _member_cells(member: HouseholdMember, field_names: tuple[str, ...]) -> list[str]:
    if member.is_closed:
        return ["Closed record"] + [""] * (len(field_names) - 1)
    cells = [member.get(field_name) for field_name in field_names]
    if member.is_selected and cells and cells[0]:
        cells[0] = f"'''{cells[0]}'''"
    return cells


def _build_wiki_table(
    gd: GeneralizedData, table_format: str, caption: str, field_names: tuple[str, ...]
) -> str:
    lines = [TABLE_OPENINGS[table_format]]
    if caption:
        lines.append(f"|+ {caption}")
    lines.append("|-")
    lines.append("! " + " !! ".join(heading_for_field(name) for name in field_names))
    for member in gd.household.members:
        lines.append("|-")
        lines.append("| " + " || ".join(_member_cells(member, field_names)))
    lines.append("|}")
    return "\n".join(lines)


def _build_list(gd: GeneralizedData, caption: str, field_names: tuple[str, ...]) -> str:
    lines = [caption + ":"] if caption else []
    for member in gd.household.members:
        cells = _member_cells(member, field_names)
        if not cells or not cells[0]:
            continue
        details = [
            f"{heading_for_field(name).lower()} {value}"
            for name, value in zip(field_names[1:], cells[1:])
            if value
        ]
        line = "* " + cells[0]
        if details:
            line += " (" + ", ".join(details) + ")"
        lines.append(line)
    return "\n".join(lines)


def build_household_table(
    gd: GeneralizedData,
    options: Mapping[str, Any] | None = None,
    citation: CitationResult | None = None,
) -> str:
    """Render the household as a wiki table or a bulleted list.

    When ``table_general_autoGenerate`` is ``citationInTableCaption`` and an
    inline ``citation`` is given, it is appended to the caption. Returns an
    empty string when the record has no household.
    """
    if not gd.has_household_table():
        return ""
    options = options if isinstance(options, Options) else Options(options)

    field_names = gd.household.field_names
    if "name" in field_names:
        field_names = ("name",) + tuple(name for name in field_names if name != "name")

    caption = build_caption(gd, options)
    if citation is not None and options["table_general_autoGenerate"] == "citationInTableCaption":
        caption = (caption + citation.citation) if caption else citation.citation

    table_format = options["table_general_format"]
    if table_format == "list":
        return _build_list(gd, caption, field_names)
    return _build_wiki_table(gd, table_format, caption, field_names)
