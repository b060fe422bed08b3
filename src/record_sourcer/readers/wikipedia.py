"""Reader for Wikipedia biography articles."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from record_sourcer.models.name import NameObj
from record_sourcer.models.record_type import RecordType, SourceType
from record_sourcer.readers.base import ExtractedDataReader

_DISAMBIGUATION_RE = re.compile(r"\s*\([^)]*\)\s*$")


class WikipediaReader(ExtractedDataReader):
    """Wikipedia articles: ``url``, ``permalink`` and ``title``."""

    site_name = "wikipedia"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.source_type = SourceType.PROFILE
        self.record_type = RecordType.ENCYCLOPEDIA

    def has_valid_data(self) -> bool:
        return bool(self._str("url")) and bool(self._str("title"))

    def get_name_obj(self) -> NameObj | None:
        # "John Smith (cricketer)" -> "John Smith"
        title = _DISAMBIGUATION_RE.sub("", self._str("title"))
        return self.make_name_obj_from_full_name(title)
