"""Reader for New Zealand Births, Deaths & Marriages historical records."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import Parents, Spouse
from record_sourcer.models.name import NameObj
from record_sourcer.models.record_type import RecordType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.utils.name_utils import convert_name_from_all_caps_to_mixed_case

RECORD_TYPES = {
    "birth": RecordType.BIRTH_REGISTRATION,
    "death": RecordType.DEATH_REGISTRATION,
    "marriage": RecordType.MARRIAGE_REGISTRATION,
}

_REGISTRATION_YEAR_RE = re.compile(r"^(\d{4})/")


class NzbdmReader(ExtractedDataReader):
    """NZ BDM search result details.

    ``recordType`` is birth, death or marriage and ``recordData`` holds the
    result fields ("Registration Number", "Family Name", "Given Name(s)",
    "Mother's Given Name(s)", "Father's Given Name(s)", "Spouse's Family Name",
    "Spouse's Given Name(s)", "Date of Birth/Age at Death").
    """

    site_name = "nzbdm"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.record_data: Mapping[str, Any] = ed.get("recordData") or {}
        self.record_type = RECORD_TYPES.get(self._str("recordType"), RecordType.UNCLASSIFIED)

    def _value(self, label: str) -> str:
        value = self.record_data.get(label)
        return str(value).strip() if value else ""

    def _family_name(self, label: str = "Family Name") -> str:
        return convert_name_from_all_caps_to_mixed_case(self._value(label))

    def has_valid_data(self) -> bool:
        return self.record_type != RecordType.UNCLASSIFIED and bool(self.record_data)

    def get_registration_number(self) -> str:
        return self._value("Registration Number")

    def get_name_obj(self) -> NameObj | None:
        return self.make_name_obj_from_forenames_and_last_name(
            convert_name_from_all_caps_to_mixed_case(self._value("Given Name(s)")),
            self._family_name(),
        )

    def get_event_date_obj(self) -> DateObj | None:
        # Registration numbers are "<year>/<number>"
        match = _REGISTRATION_YEAR_RE.match(self.get_registration_number())
        return self.make_date_obj_from_year(match.group(1)) if match else None

    def get_last_name_at_birth(self) -> str:
        if self.record_type == RecordType.BIRTH_REGISTRATION:
            return self._family_name()
        return ""

    def get_last_name_at_death(self) -> str:
        if self.record_type == RecordType.DEATH_REGISTRATION:
            return self._family_name()
        return ""

    def get_birth_date_obj(self) -> DateObj | None:
        if self.record_type == RecordType.BIRTH_REGISTRATION:
            return self.get_event_date_obj()
        if self.record_type == RecordType.DEATH_REGISTRATION:
            value = self._value("Date of Birth/Age at Death")
            if value and "year" not in value.lower() and not value.isdigit():
                return self.make_date_obj_from_date_string(value)
        return None

    def get_death_date_obj(self) -> DateObj | None:
        if self.record_type == RecordType.DEATH_REGISTRATION:
            return self.get_event_date_obj()
        return None

    def get_age_at_death(self) -> str:
        if self.record_type != RecordType.DEATH_REGISTRATION:
            return ""
        value = self._value("Date of Birth/Age at Death")
        if value.isdigit():
            return value
        match = re.match(r"^(\d+)\s+years?$", value, re.IGNORECASE)
        return match.group(1) if match else ""

    def get_spouse_obj(self) -> Spouse | None:
        if self.record_type != RecordType.MARRIAGE_REGISTRATION:
            return None
        name_obj = self.make_name_obj_from_forenames_and_last_name(
            convert_name_from_all_caps_to_mixed_case(self._value("Spouse's Given Name(s)")),
            self._family_name("Spouse's Family Name"),
        )
        return self.make_spouse_obj(name_obj, self.get_event_date_obj())

    def get_parents(self) -> Parents | None:
        if self.record_type == RecordType.MARRIAGE_REGISTRATION:
            return None
        # Parents' names are given names only; the family name is the child's
        last_name = self._family_name()
        father = convert_name_from_all_caps_to_mixed_case(self._value("Father's Given Name(s)"))
        mother = convert_name_from_all_caps_to_mixed_case(self._value("Mother's Given Name(s)"))
        return self.make_parents_from_forenames_and_last_names(
            father, last_name if father else "", mother, ""
        )
