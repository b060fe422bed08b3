"""Wikipedia article citations in the Chicago style Wikipedia itself suggests.

Wikipedia contributors, "World War I," Wikipedia, The Free Encyclopedia,
https://en.wikipedia.org/w/index.php?title=World_War_I&oldid=1180666851 (accessed 20 October 2023).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.builder import CitationBuilder, CitationInput, CitationResult, simple_build_citation_wrapper
from record_sourcer.models.generalized import GeneralizedData

_LANG_RE = re.compile(r"^https?://(\w+)\.wikipedia")

PLAIN_LINK_TYPES = ("plainSimple", "plainPermalink")


def _language(url: str) -> str:
    match = _LANG_RE.match(url or "")
    if match and match.group(1) != "en":
        return match.group(1)
    return ""


def get_link(ed: Mapping[str, Any], builder: CitationBuilder, link_text: str) -> str:
    options = builder.get_options()
    link_type = options["citation_wikipedia_citationLinkType"]
    url = ed.get("url") or ""
    if ed.get("permalink") and link_type in ("permalink", "plainPermalink"):
        url = ed["permalink"]

    if link_type in ("permalink", "external"):
        return f"[{url} {link_text}]"
    if link_type == "special":
        wiki_text = "Wikipedia:"
        lang = _language(ed.get("url") or "")
        if lang:
            wiki_text += lang + ":"
        return f"[[{wiki_text}{ed.get('title', '')}|{link_text or 'Wikipedia'}]]"
    return url


def get_encyclopedia_name(builder: CitationBuilder) -> str:
    if builder.get_options()["citation_wikipedia_citationUseItalics"]:
        return "''Wikipedia, The Free Encyclopedia''"
    return "Wikipedia, The Free Encyclopedia"


def build_source_title(ed: Mapping[str, Any], builder: CitationBuilder) -> None:
    options = builder.get_options()
    link_type = options["citation_wikipedia_citationLinkType"]
    location = options["citation_wikipedia_citationLinkLocation"]
    title = ed.get("title")

    if title:
        if location == "title" and link_type not in PLAIN_LINK_TYPES:
            title = get_link(ed, builder, title)
        builder.source_title = f'Wikipedia contributors, "{title}"'
    else:
        builder.source_title = "Wikipedia contributors"
    builder.put_source_title_in_quotes = False


def build_source_reference(builder: CitationBuilder) -> None:
    options = builder.get_options()
    link_type = options["citation_wikipedia_citationLinkType"]
    location = options["citation_wikipedia_citationLinkLocation"]
    if link_type in PLAIN_LINK_TYPES or location in ("afterWikipedia", "afterWikipediaEntry"):
        builder.source_reference = get_encyclopedia_name(builder)


def build_record_link(ed: Mapping[str, Any], builder: CitationBuilder) -> None:
    options = builder.get_options()
    link_type = options["citation_wikipedia_citationLinkType"]
    location = options["citation_wikipedia_citationLinkLocation"]

    if link_type in PLAIN_LINK_TYPES:
        builder.record_link_or_template = get_link(ed, builder, "")
    elif location == "reference":
        builder.record_link_or_template = get_link(ed, builder, get_encyclopedia_name(builder))
    elif location == "title":
        builder.record_link_or_template = get_encyclopedia_name(builder)
    elif location == "afterWikipedia":
        builder.record_link_or_template = get_link(ed, builder, "Wikipedia")
    elif location == "afterWikipediaEntry":
        builder.record_link_or_template = get_link(ed, builder, "Wikipedia Entry")


def build_core_citation(ed: Mapping[str, Any], gd: GeneralizedData, builder: CitationBuilder) -> None:
    build_source_title(ed, builder)
    build_source_reference(builder)
    build_record_link(ed, builder)


def build_citation(input: CitationInput) -> CitationResult:
    return simple_build_citation_wrapper(input, build_core_citation)
