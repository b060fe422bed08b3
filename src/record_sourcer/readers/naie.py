"""Reader for the National Archives of Ireland 1901 and 1911 census pages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import Household, HouseholdMember
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import RecordType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.utils.relationship_utils import standardize_relationship_to_head

HOUSEHOLD_FIELD_NAMES = {
    "Forename": "forenames",
    "Surname": "lastName",
    "Age": "age",
    "Sex": "gender",
    "Relation to head": "relationship",
    "Occupation": "occupation",
    "Marital Status": "maritalStatus",
    "Birthplace": "birthPlace",
}

GENDERS = {"m": "male", "male": "male", "f": "female", "female": "female"}


class NaieReader(ExtractedDataReader):
    """Census of Ireland person pages.

    ``recordData`` holds the transcribed form fields of the selected person
    ("Surname", "Forename", "Age", "Sex", "Relation to head", "Townland/Street",
    "DED", "County"); ``censusYear`` is 1901 or 1911 and ``household`` lists
    everyone on the same form.
    """

    site_name = "naie"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.record_data: Mapping[str, Any] = ed.get("recordData") or {}
        self.record_type = RecordType.CENSUS

    def _value(self, label: str) -> str:
        value = self.record_data.get(label)
        return str(value).strip() if value else ""

    def has_valid_data(self) -> bool:
        return bool(self.record_data) and bool(self._str("censusYear"))

    def get_name_obj(self) -> NameObj | None:
        return self.make_name_obj_from_forenames_and_last_name(self._value("Forename"), self._value("Surname"))

    def get_gender(self) -> str:
        return GENDERS.get(self._value("Sex").lower(), "")

    def get_event_date_obj(self) -> DateObj | None:
        return self.make_date_obj_from_year(self._str("censusYear"))

    def get_event_place_obj(self) -> PlaceObj | None:
        parts = [self._value("Townland/Street"), self._value("DED"), self._value("County"), "Ireland"]
        if not any(parts[:3]):
            return None
        return self.make_place_obj_from_full_place_name(", ".join(part for part in parts if part))

    def get_age_at_event(self) -> str:
        return self._value("Age")

    def get_relationship_to_head(self) -> str:
        return standardize_relationship_to_head(self._value("Relation to head"))

    def get_marital_status(self) -> str:
        return self._value("Marital Status").lower()

    def get_occupation(self) -> str:
        return self._value("Occupation")

    def get_household(self) -> Household | None:
        household = self.ed.get("household")
        if not household:
            return None
        headings = household.get("headings") or []
        members = household.get("members") or []
        if not headings or not members:
            return None

        field_names: list[str] = []
        if "Forename" in headings or "Surname" in headings:
            field_names.append("name")
        for heading in headings:
            field_name = HOUSEHOLD_FIELD_NAMES.get(heading)
            if field_name and field_name not in ("forenames", "lastName"):
                field_names.append(field_name)

        result_members = []
        for member in members:
            values: dict[str, str] = {}
            name = " ".join(
                part for part in (member.get("Forename", ""), member.get("Surname", "")) if part
            )
            if name:
                values["name"] = name
            for heading in headings:
                field_name = HOUSEHOLD_FIELD_NAMES.get(heading)
                value = member.get(heading)
                if not field_name or not value or field_name in ("forenames", "lastName"):
                    continue
                if field_name == "relationship":
                    value = standardize_relationship_to_head(value)
                elif field_name == "gender":
                    value = GENDERS.get(str(value).lower(), "")
                values[field_name] = str(value)
            result_members.append(
                HouseholdMember(
                    values=values,
                    is_selected=bool(member.get("isSelected")),
                    link=member.get("link"),
                )
            )

        return Household(field_names=tuple(field_names), members=tuple(result_members))
