"""Citation construction for generalized records."""

from __future__ import annotations

from collections.abc import Callable

from record_sourcer.citation.builder import (
    CitationBuilder,
    CitationInput,
    CitationResult,
    CitationType,
    simple_build_citation_wrapper,
)
from record_sourcer.citation.sites import familysearch, freebmd, myheritage, naie, nzbdm, wiewaswie, wikipedia
from record_sourcer.readers.registry import Site, resolve_site

CITATION_BUILDERS: dict[Site, Callable[[CitationInput], CitationResult]] = {
    Site.FAMILYSEARCH: familysearch.build_citation,
    Site.FREEBMD: freebmd.build_citation,
    Site.MYHERITAGE: myheritage.build_citation,
    Site.NAIE: naie.build_citation,
    Site.NZBDM: nzbdm.build_citation,
    Site.WIEWASWIE: wiewaswie.build_citation,
    Site.WIKIPEDIA: wikipedia.build_citation,
}


def build_citation(site: Site | str, input: CitationInput) -> CitationResult:
    """Build a citation for a record from ``site``."""
    return CITATION_BUILDERS[resolve_site(site)](input)


__all__ = [
    "CITATION_BUILDERS",
    "CitationBuilder",
    "CitationInput",
    "CitationResult",
    "CitationType",
    "build_citation",
    "simple_build_citation_wrapper",
]
