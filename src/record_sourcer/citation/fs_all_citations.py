"""Build citations for every source attached to a FamilySearch person."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

import httpx
from pydantic import BaseModel

from record_sourcer.citation.builder import CitationInput, CitationType
from record_sourcer.citation.sites import familysearch
from record_sourcer.config import Options
from record_sourcer.exceptions import InvalidExtractedDataError
from record_sourcer.fetch import FsSource, fetch_fs_sources_json, fetch_records
from record_sourcer.generalize import generalize_extracted_data
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.readers.familysearch import extract_data_from_fetch
from record_sourcer.table.household import build_household_table, does_citation_want_household_table
from record_sourcer.utils.date_utils import compare_date_strings

logger = logging.getLogger(__name__)

# '"England and Wales Census, 1881" 1881 https://... Accessed 9 June 2022.'
_PLAIN_CITATION_RE = re.compile(r'^"([^"]+)"\s+(\d{4}) http')
_PLAIN_CITATION_LINK_RE = re.compile(r'^"[^"]+"\s+\d{4} (http.*)\. Accessed')
_NAME_JOIN_RE = re.compile(r"\s+in\s+the\s+")


class AllCitationsResult(BaseModel):
    success: bool
    citations_string: str = ""
    sources: list[FsSource] = []


@dataclass
class SourceEntry:
    """A source with whatever could be learned about it."""

    source: FsSource
    gd: GeneralizedData | None = None
    citation: str = ""
    sort_year: str = ""
    first_sentence: str = ""
    link: str = ""
    pref_name: str = ""


def _compare(a: str, b: str) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_sort_keys(a: FsSource, b: FsSource) -> int:
    """Sources with a sort key come first, ordered by key."""
    if a.sort_key:
        if b.sort_key:
            return _compare(a.sort_key, b.sort_key)
        return -1
    if b.sort_key:
        return 1
    return 0


def compare_entries(a: SourceEntry, b: SourceEntry) -> int:
    """Order by inferred event date, else sort key, else sort year."""
    if a.gd is not None and b.gd is not None:
        date_a = a.gd.infer_event_date()
        date_b = b.gd.infer_event_date()
        if date_a and date_b:
            return compare_date_strings(date_a, date_b)
    if a.source.sort_key and b.source.sort_key:
        return _compare(a.source.sort_key, b.source.sort_key)
    if a.sort_year and b.sort_year:
        return _compare(a.sort_year, b.sort_year)
    if a.sort_year:
        return -1
    if b.sort_year:
        return 1
    return 0


def get_fs_plain_inline_citations(sources: list[FsSource]) -> str:
    ordered = sorted(sources, key=functools.cmp_to_key(compare_sort_keys))
    return "\n\n".join(
        f"<ref>\n{source.citation.strip()}\n</ref>" for source in ordered if source.citation
    )


def get_fs_plain_source_citations(sources: list[FsSource]) -> str:
    ordered = sorted(sources, key=functools.cmp_to_key(compare_sort_keys))
    return "".join(f"* {source.citation.strip()}\n" for source in ordered if source.citation)


def parse_plain_citation(entry: SourceEntry) -> None:
    """Fill the fallback fields of ``entry`` from FamilySearch's citation text."""
    source = entry.source
    entry.sort_year = source.sort_year
    match = _PLAIN_CITATION_RE.match(source.citation)
    if not match:
        return
    entry.first_sentence = match.group(1)
    entry.sort_year = match.group(2)
    link_match = _PLAIN_CITATION_LINK_RE.match(source.citation)
    if link_match:
        entry.link = link_match.group(1)

    title = source.title or entry.first_sentence
    join = _NAME_JOIN_RE.search(title)
    if join:
        entry.pref_name = title[: join.start()]


def _fallback_citation(entry: SourceEntry, citation_type: CitationType) -> str:
    text = entry.source.citation.strip()
    if citation_type == CitationType.SOURCE:
        return f"* {text}"
    ref = f"<ref>\n{text}\n</ref>"
    if citation_type == CitationType.INLINE:
        return ref
    sentence = (entry.pref_name or "This person") + " was in a record"
    if entry.sort_year:
        sentence += f" in {entry.sort_year}"
    return sentence + "." + ref


def build_source_citation(
    source: FsSource, citation_type: CitationType, options: Options, run_date: date
) -> tuple[GeneralizedData, str] | None:
    """Generalize and cite one fetched source record. None if it cannot be read."""
    if source.data_obj is None:
        return None
    ed = extract_data_from_fetch(source.data_obj, url=source.uri)
    try:
        gd = generalize_extracted_data("familysearch", ed)
    except InvalidExtractedDataError:
        logger.info("Fetched record for %s could not be generalized", source.uri)
        return None

    household_table = ""
    if does_citation_want_household_table(citation_type, gd, options):
        household_table = build_household_table(gd, options)
    result = familysearch.build_citation(
        CitationInput(
            ed=ed,
            gd=gd,
            run_date=run_date,
            type=citation_type,
            options=options,
            household_table_string=household_table,
        )
    )
    return gd, result.citation


async def get_record_citations(
    sources: list[FsSource],
    citation_type: CitationType,
    options: Options,
    run_date: date,
    client: httpx.AsyncClient | None = None,
) -> str:
    fetched = await fetch_records(sources, client=client)
    if not fetched.success:
        logger.info("Not every source record could be fetched: %s", fetched.error_condition)

    entries = []
    for source in sources:
        entry = SourceEntry(source=source, sort_year=source.sort_year)
        built = build_source_citation(source, citation_type, options, run_date)
        if built is not None:
            entry.gd, entry.citation = built
        elif source.citation:
            parse_plain_citation(entry)
        entries.append(entry)

    entries.sort(key=functools.cmp_to_key(compare_entries))

    parts = []
    for entry in entries:
        if entry.citation:
            parts.append(entry.citation)
        elif entry.source.citation:
            parts.append(_fallback_citation(entry, citation_type))
    separator = "\n" if citation_type == CitationType.SOURCE else "\n\n"
    return separator.join(parts)


async def build_all_citations(
    ed: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
    run_date: date | None = None,
    client: httpx.AsyncClient | None = None,
) -> AllCitationsResult:
    """Build one citation per source in ``ed["sourceIds"]``.

    The style comes from ``addMerge_fsAllCitations_citationType``.
    """
    options = options if isinstance(options, Options) else Options(options)
    run_date = run_date or date.today()

    sources_result = await fetch_fs_sources_json(ed.get("sourceIds"), client=client)
    if not sources_result.success:
        return AllCitationsResult(success=False)

    sources = [FsSource.from_json(source) for source in sources_result.data_obj.get("sources") or []]
    citation_type = options["addMerge_fsAllCitations_citationType"]

    if citation_type == "fsPlainInline":
        citations = get_fs_plain_inline_citations(sources)
    elif citation_type == "fsPlainSource":
        citations = get_fs_plain_source_citations(sources)
    else:
        citations = await get_record_citations(
            sources, CitationType(citation_type), options, run_date, client=client
        )
    return AllCitationsResult(success=True, citations_string=citations, sources=sources)
