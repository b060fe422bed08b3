"""Assemble citation text from site fragments under the user's options."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from record_sourcer.citation.data_string import build_data_string
from record_sourcer.citation.narrative import build_narrative
from record_sourcer.config import Options
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.utils.date_utils import LONG_MONTH_NAMES, SHORT_MONTH_NAMES


class CitationType(str, Enum):
    INLINE = "inline"
    SOURCE = "source"
    NARRATIVE = "narrative"


SOURCE_REFERENCE_SEPARATORS = {
    "commaSpace": ", ",
    "semicolonSpace": "; ",
    "colonSpace": ": ",
}

_CLEANUPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r",[ \t]*,"), ","),
    (re.compile(r"[ \t]+,"), ","),
    (re.compile(r"(?<!\.)\.\.(?!\.)"), "."),
    (re.compile(r",\."), "."),
    (re.compile(r",[ \t]*(?=<br/>|\n|</ref>|$)"), ""),
    (re.compile(r"[ \t]{2,}"), " "),
)


def cleanup_citation_text(text: str) -> str:
    """Remove doubled or dangling punctuation left by missing fragments."""
    for pattern, replacement in _CLEANUPS:
        text = pattern.sub(replacement, text)
    return text


def format_run_date(run_date: date, date_format: str) -> str:
    if date_format == "iso":
        return run_date.isoformat()
    if date_format == "short":
        return f"{run_date.day} {SHORT_MONTH_NAMES[run_date.month - 1]} {run_date.year}"
    return f"{run_date.day} {LONG_MONTH_NAMES[run_date.month - 1]} {run_date.year}"


def _clean_segment(segment: str) -> str:
    return segment.strip().rstrip(",").strip()


class CitationBuilder:
    """Collects the fragments for one citation and renders them.

    Site code fills in the fragment attributes; any of them may be left
    empty and is then omitted from the output.
    """

    def __init__(
        self,
        type: CitationType | str,
        run_date: date,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self.type = CitationType(type)
        self.run_date = run_date
        self.options = options if isinstance(options, Options) else Options(options)

        self.source_title = ""
        self.source_reference = ""
        self.record_link_or_template = ""
        self.image_link = ""
        self.data_string = ""
        self.meaningful_title = ""
        self.household_table_string = ""
        self.narrative = ""
        self.put_source_title_in_quotes = True

    def get_options(self) -> Options:
        return self.options

    def add_standard_data_string(self, gd: GeneralizedData) -> None:
        data_string = build_data_string(gd)
        if data_string and not data_string.endswith("."):
            data_string += "."
        self.data_string = data_string

    def add_narrative(self, gd: GeneralizedData) -> None:
        self.narrative = build_narrative(gd, self.options)

    def _accessed_date(self) -> str:
        return format_run_date(self.run_date, self.options["citation_general_dateFormat"])

    def _title_prefix(self, newline: bool, body: str) -> str:
        if not self.meaningful_title:
            return ""
        style = self.options["citation_general_meaningfulNames"]
        if style == "none":
            return ""
        if style == "bold":
            title = f"'''{self.meaningful_title}'''"
        elif style == "italic":
            title = f"''{self.meaningful_title}''"
        else:
            title = self.meaningful_title
        if not body:
            return title
        return title + ":" + ("\n" if newline else " ")

    def _source_segment(self) -> str:
        title = self.source_title.strip()
        if title and self.put_source_title_in_quotes:
            title = f'"{title}"'
        reference = self.source_reference.strip()
        if title and reference:
            separator = SOURCE_REFERENCE_SEPARATORS[self.options["citation_general_sourceReferenceSeparator"]]
            return title + separator + reference
        return title or reference

    def _link_segment(self) -> str:
        link = self.record_link_or_template.strip()
        if not link:
            return ""
        accessed = self.options["citation_general_addAccessedDate"]
        if accessed == "parenAfterLink":
            return f"{link} (accessed {self._accessed_date()})"
        if accessed == "afterLink":
            return f"{link}, accessed {self._accessed_date()}"
        return link

    def _table_placement(self) -> str:
        if not self.household_table_string:
            return ""
        if self.options["table_general_autoGenerate"] == "withinRefOrSource":
            return "within"
        return "after"

    def get_body(self, newline: bool) -> str:
        segments = [
            self._source_segment(),
            self._link_segment(),
            self.image_link,
        ]
        data_string = _clean_segment(self.data_string)
        if data_string and self.options["citation_general_dataStringIndented"] and newline:
            data_string = ":" + data_string
        segments.append(data_string)
        segments = [_clean_segment(segment) for segment in segments if _clean_segment(segment)]

        if self.options["citation_general_addBreaksWithinBody"]:
            separator = "<br/>" + ("\n" if newline else "")
        else:
            separator = "\n" if newline else ", "
        body = cleanup_citation_text(separator.join(segments))

        if self._table_placement() == "within":
            body += "\n" + self.household_table_string.strip()
        return body

    def _inline(self) -> str:
        newline = bool(self.options["citation_general_addNewlinesWithinRefs"])
        nl = "\n" if newline else ""
        body = self.get_body(newline)
        citation = "<ref>" + nl + self._title_prefix(newline, body) + body + nl + "</ref>"
        if self._table_placement() == "after":
            citation += "\n" + self.household_table_string.strip()
        return citation

    def _source(self) -> str:
        newline = bool(self.options["citation_general_addNewlinesWithinBody"])
        body = self.get_body(newline)
        citation = "* " + self._title_prefix(newline, body) + body
        if self._table_placement() == "after":
            citation += "\n" + self.household_table_string.strip()
        return citation

    def get_citation_string(self) -> str:
        if self.type == CitationType.SOURCE:
            return self._source()
        if self.type == CitationType.NARRATIVE:
            return self.narrative.strip() + self._inline()
        return self._inline()


@dataclass(frozen=True)
class CitationInput:
    """Everything a citation depends on."""

    ed: Mapping[str, Any]
    gd: GeneralizedData
    run_date: date
    type: CitationType = CitationType.INLINE
    options: Mapping[str, Any] = field(default_factory=Options)
    household_table_string: str = ""


class CitationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    citation: str
    type: CitationType


CoreCitationFunction = Callable[[Mapping[str, Any], GeneralizedData, CitationBuilder], None]


def simple_build_citation_wrapper(
    input: CitationInput, build_core_citation: CoreCitationFunction
) -> CitationResult:
    """Run a site's core citation function and render the result.

    The meaningful title defaults to the record type's reference title and
    a narrative is added for narrative citations.
    """
    citation_type = CitationType(input.type)
    builder = CitationBuilder(citation_type, input.run_date, input.options)
    builder.household_table_string = input.household_table_string

    build_core_citation(input.ed, input.gd, builder)

    if not builder.meaningful_title:
        builder.meaningful_title = input.gd.get_ref_title()
    if citation_type == CitationType.NARRATIVE and not builder.narrative:
        builder.add_narrative(input.gd)

    return CitationResult(citation=builder.get_citation_string(), type=citation_type)
