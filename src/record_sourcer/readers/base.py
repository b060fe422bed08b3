"""Base interface for per-site extracted data readers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from record_sourcer.models.date import (
    DateObj,
    make_date_obj_from_date_string,
    make_date_obj_from_ddmmyyyy,
    make_date_obj_from_year,
    make_date_obj_from_year_and_quarter,
)
from record_sourcer.models.generalized import (
    CollectionData,
    Household,
    Parent,
    Parents,
    Spouse,
)
from record_sourcer.models.name import (
    NameObj,
    make_name_obj_from_forenames,
    make_name_obj_from_forenames_and_last_name,
    make_name_obj_from_full_name,
)
from record_sourcer.models.place import PlaceObj, make_place_obj_from_full_place_name
from record_sourcer.models.record_type import RecordSubtype, RecordType, SourceType

logger = logging.getLogger(__name__)


@runtime_checkable
class RecordReader(Protocol):
    """Protocol defining the accessors every site reader answers.

    An accessor with nothing to report returns "" or None; it never raises.
    """

    site_name: str

    def has_valid_data(self) -> bool:
        """Check whether the extracted data is a record this reader understands."""
        ...

    def get_source_type(self) -> SourceType: ...

    def get_record_type(self) -> RecordType: ...

    def get_record_subtype(self) -> RecordSubtype | None: ...

    def get_name_obj(self) -> NameObj | None: ...

    def get_gender(self) -> str: ...

    def get_event_date_obj(self) -> DateObj | None: ...

    def get_event_place_obj(self) -> PlaceObj | None: ...

    def get_birth_date_obj(self) -> DateObj | None: ...

    def get_birth_place_obj(self) -> PlaceObj | None: ...

    def get_death_date_obj(self) -> DateObj | None: ...

    def get_death_place_obj(self) -> PlaceObj | None: ...

    def get_last_name_at_birth(self) -> str: ...

    def get_last_name_at_death(self) -> str: ...

    def get_mothers_maiden_name(self) -> str: ...

    def get_age_at_event(self) -> str: ...

    def get_age_at_death(self) -> str: ...

    def get_registration_district(self) -> str: ...

    def get_relationship_to_head(self) -> str: ...

    def get_marital_status(self) -> str: ...

    def get_occupation(self) -> str: ...

    def get_spouse_obj(self) -> Spouse | None: ...

    def get_spouses(self) -> list[Spouse]: ...

    def get_parents(self) -> Parents | None: ...

    def get_household(self) -> Household | None: ...

    def get_collection_data(self) -> CollectionData | None: ...


class ExtractedDataReader(ABC):
    """Abstract base class for site readers.

    Subclasses override the accessors their site can answer; everything
    else falls through to the "no data" defaults here. The extracted data
    mapping is held by reference and never modified.
    """

    site_name: str = "base"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        """Initialize the reader.

        Args:
            ed: Extracted data produced by the site's page scraper
        """
        self.ed = ed
        self.source_type = SourceType.RECORD
        self.record_type = RecordType.UNCLASSIFIED
        self.record_subtype: RecordSubtype | None = None

    @abstractmethod
    def has_valid_data(self) -> bool:
        """Check whether the extracted data is a record this reader understands."""

    def get_source_type(self) -> SourceType:
        return self.source_type

    def get_record_type(self) -> RecordType:
        return self.record_type

    def get_record_subtype(self) -> RecordSubtype | None:
        return self.record_subtype

    def get_name_obj(self) -> NameObj | None:
        return None

    def get_gender(self) -> str:
        return ""

    def get_event_date_obj(self) -> DateObj | None:
        return None

    def get_event_place_obj(self) -> PlaceObj | None:
        return None

    def get_birth_date_obj(self) -> DateObj | None:
        return None

    def get_birth_place_obj(self) -> PlaceObj | None:
        return None

    def get_death_date_obj(self) -> DateObj | None:
        return None

    def get_death_place_obj(self) -> PlaceObj | None:
        return None

    def get_last_name_at_birth(self) -> str:
        return ""

    def get_last_name_at_death(self) -> str:
        return ""

    def get_mothers_maiden_name(self) -> str:
        return ""

    def get_age_at_event(self) -> str:
        return ""

    def get_age_at_death(self) -> str:
        return ""

    def get_registration_district(self) -> str:
        return ""

    def get_relationship_to_head(self) -> str:
        return ""

    def get_marital_status(self) -> str:
        return ""

    def get_occupation(self) -> str:
        return ""

    def get_spouse_obj(self) -> Spouse | None:
        return None

    def get_spouses(self) -> list[Spouse]:
        spouse = self.get_spouse_obj()
        return [spouse] if spouse else []

    def get_parents(self) -> Parents | None:
        return None

    def get_household(self) -> Household | None:
        return None

    def get_collection_data(self) -> CollectionData | None:
        return None

    # Helpers shared by the site readers

    def _str(self, key: str) -> str:
        """Return ``ed[key]`` as a stripped string, or "" when absent."""
        value = self.ed.get(key)
        if value is None:
            return ""
        return str(value).strip()

    def make_name_obj_from_full_name(self, full_name: str | None) -> NameObj | None:
        return make_name_obj_from_full_name(full_name)

    def make_name_obj_from_forenames_and_last_name(
        self, forenames: str | None, last_name: str | None
    ) -> NameObj | None:
        return make_name_obj_from_forenames_and_last_name(forenames, last_name)

    def make_name_obj_from_forenames(self, forenames: str | None) -> NameObj | None:
        return make_name_obj_from_forenames(forenames)

    def make_date_obj_from_date_string(self, date_string: str | None) -> DateObj | None:
        return make_date_obj_from_date_string(date_string)

    def make_date_obj_from_year(self, year: str | int | None) -> DateObj | None:
        return make_date_obj_from_year(year)

    def make_date_obj_from_year_and_quarter(
        self, year: str | int | None, quarter: int | None
    ) -> DateObj | None:
        return make_date_obj_from_year_and_quarter(year, quarter)

    def make_date_obj_from_ddmmyyyy(self, text: str | None, separator: str) -> DateObj | None:
        return make_date_obj_from_ddmmyyyy(text, separator)

    def make_place_obj_from_full_place_name(self, place_name: str | None) -> PlaceObj | None:
        return make_place_obj_from_full_place_name(place_name)

    def make_spouse_obj(
        self,
        name_obj: NameObj | None,
        marriage_date: DateObj | None = None,
        marriage_place: PlaceObj | None = None,
        age: str = "",
        person_gender: str = "",
        parents: Parents | None = None,
    ) -> Spouse | None:
        if not name_obj and not marriage_date and not marriage_place:
            return None
        return Spouse(
            name=name_obj,
            marriage_date=marriage_date,
            marriage_place=marriage_place,
            age=age,
            person_gender=person_gender,
            parents=parents,
        )

    def make_parents_from_full_names(
        self, father_name: str | None, mother_name: str | None = None
    ) -> Parents | None:
        return _make_parents(
            make_name_obj_from_full_name(father_name),
            make_name_obj_from_full_name(mother_name),
        )

    def make_parents_from_forenames_and_last_names(
        self,
        father_forenames: str | None,
        father_last_name: str | None,
        mother_forenames: str | None,
        mother_last_name: str | None,
    ) -> Parents | None:
        return _make_parents(
            make_name_obj_from_forenames_and_last_name(father_forenames, father_last_name),
            make_name_obj_from_forenames_and_last_name(mother_forenames, mother_last_name),
        )


def _make_parents(father: NameObj | None, mother: NameObj | None) -> Parents | None:
    if not father and not mother:
        return None
    return Parents(
        father=Parent(name=father) if father else None,
        mother=Parent(name=mother) if mother else None,
    )
