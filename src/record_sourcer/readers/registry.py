"""Registry mapping each supported site to its reader."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from record_sourcer.exceptions import UnknownSiteError
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.readers.familysearch import FamilysearchReader
from record_sourcer.readers.freebmd import FreebmdReader
from record_sourcer.readers.myheritage import MyHeritageReader
from record_sourcer.readers.naie import NaieReader
from record_sourcer.readers.nzbdm import NzbdmReader
from record_sourcer.readers.wiewaswie import WiewaswieReader
from record_sourcer.readers.wikipedia import WikipediaReader


class Site(str, Enum):
    """Sites with a reader."""

    FAMILYSEARCH = "familysearch"
    FREEBMD = "freebmd"
    MYHERITAGE = "myheritage"
    NAIE = "naie"
    NZBDM = "nzbdm"
    WIEWASWIE = "wiewaswie"
    WIKIPEDIA = "wikipedia"


READERS: dict[Site, type[ExtractedDataReader]] = {
    Site.FAMILYSEARCH: FamilysearchReader,
    Site.FREEBMD: FreebmdReader,
    Site.MYHERITAGE: MyHeritageReader,
    Site.NAIE: NaieReader,
    Site.NZBDM: NzbdmReader,
    Site.WIEWASWIE: WiewaswieReader,
    Site.WIKIPEDIA: WikipediaReader,
}


def resolve_site(site: Site | str) -> Site:
    """Accept a Site or its name and return the Site."""
    try:
        return Site(site)
    except ValueError:
        raise UnknownSiteError(site=str(site)) from None


def get_reader(site: Site | str, ed: Mapping[str, Any]) -> ExtractedDataReader:
    """Create the reader for ``site`` over extracted data ``ed``."""
    return READERS[resolve_site(site)](ed)
