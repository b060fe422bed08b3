"""Reader for FreeBMD England and Wales civil registration index entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import CollectionData, Spouse
from record_sourcer.models.name import NameObj
from record_sourcer.models.record_type import RecordType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.utils.date_utils import get_quarter_from_month_name
from record_sourcer.utils.name_utils import convert_name_from_all_caps_to_mixed_case

EVENT_RECORD_TYPES = {
    "birth": RecordType.BIRTH_REGISTRATION,
    "marriage": RecordType.MARRIAGE_REGISTRATION,
    "death": RecordType.DEATH_REGISTRATION,
}

EVENT_COLLECTION_IDS = {
    "birth": "births",
    "marriage": "marriages",
    "death": "deaths",
}


class FreebmdReader(ExtractedDataReader):
    """FreeBMD index entries.

    The extracted data carries ``eventType`` (birth, marriage or death),
    ``eventYear``, ``eventQuarter`` ("Mar", "Jun", "Sep" or "Dec"),
    ``givenNames``, ``surname`` (usually in capitals), ``registrationDistrict``
    and the GRO ``referenceVolume`` and ``referencePage``.
    """

    site_name = "freebmd"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.event_type = self._str("eventType")
        self.record_type = EVENT_RECORD_TYPES.get(self.event_type, RecordType.UNCLASSIFIED)

    def _surname(self) -> str:
        return convert_name_from_all_caps_to_mixed_case(self._str("surname"))

    def has_valid_data(self) -> bool:
        return bool(self._str("eventYear"))

    def get_name_obj(self) -> NameObj | None:
        return self.make_name_obj_from_forenames_and_last_name(self._str("givenNames"), self._surname())

    def get_event_date_obj(self) -> DateObj | None:
        quarter = get_quarter_from_month_name(self._str("eventQuarter"))
        return self.make_date_obj_from_year_and_quarter(self._str("eventYear"), quarter)

    def get_last_name_at_birth(self) -> str:
        if self.event_type == "birth":
            return self._surname()
        return ""

    def get_last_name_at_death(self) -> str:
        if self.event_type == "death":
            return self._surname()
        return ""

    def get_mothers_maiden_name(self) -> str:
        return convert_name_from_all_caps_to_mixed_case(self._str("mothersMaidenName"))

    def get_birth_date_obj(self) -> DateObj | None:
        if self.event_type == "birth":
            return self.get_event_date_obj()
        if self.event_type == "death":
            return self.make_date_obj_from_date_string(self._str("birthDate"))
        return None

    def get_death_date_obj(self) -> DateObj | None:
        if self.event_type == "death":
            return self.get_event_date_obj()
        return None

    def get_age_at_death(self) -> str:
        if self.event_type == "death":
            return self._str("ageAtDeath")
        return ""

    def get_registration_district(self) -> str:
        return self._str("registrationDistrict")

    def get_spouses(self) -> list[Spouse]:
        spouse_name = self._str("spouse")
        if not spouse_name:
            return []
        name_obj = self.make_name_obj_from_full_name(convert_name_from_all_caps_to_mixed_case(spouse_name))
        spouse = self.make_spouse_obj(name_obj, self.get_event_date_obj(), self.get_event_place_obj())
        return [spouse] if spouse else []

    def get_spouse_obj(self) -> Spouse | None:
        spouses = self.get_spouses()
        return spouses[0] if spouses else None

    def get_collection_data(self) -> CollectionData | None:
        collection_id = EVENT_COLLECTION_IDS.get(self.event_type)
        if not collection_id:
            return None
        return CollectionData(
            id=collection_id,
            volume=self._str("referenceVolume"),
            page=self._str("referencePage"),
        )
