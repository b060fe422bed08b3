"""Reader for MyHeritage record and profile pages."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import Household, HouseholdMember, Parent, Parents, Spouse
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import RecordType, SourceType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.readers.classifier import (
    ClassificationInput,
    RecordTypeRule,
    classify_record_type,
)
from record_sourcer.utils.relationship_utils import standardize_relationship_to_head

# Document type rules first, then collection title rules, then required field rules
RECORD_TYPE_RULES: tuple[RecordTypeRule, ...] = (
    RecordTypeRule(
        record_type=RecordType.IMMIGRATION,
        document_types=("Immigrant Record",),
    ),
    RecordTypeRule(
        record_type=RecordType.DIVORCE,
        document_types=("Divorce",),
    ),
    RecordTypeRule(
        record_type=RecordType.BAPTISM,
        collection_title_matches=(("Births and Christenings",),),
        required_fields=(("Christening",), ("Baptism",)),
    ),
    RecordTypeRule(
        record_type=RecordType.CENSUS,
        collection_title_matches=(("Census",),),
        required_record_sections=(("Census",),),
    ),
    RecordTypeRule(
        record_type=RecordType.MARRIAGE_REGISTRATION,
        collection_title_matches=(("England & Wales, Marriage Index, 1837-2005",),),
    ),
    RecordTypeRule(
        record_type=RecordType.DIRECTORY,
        collection_title_matches=(
            ("Business Register",),
            ("U.S. Public Records Index",),
            ("Phone and Address Listings",),
        ),
    ),
    RecordTypeRule(
        record_type=RecordType.SOCIAL_SECURITY,
        collection_title_matches=(("Social Security Applications and Claims",),),
    ),
    RecordTypeRule(
        record_type=RecordType.EMPLOYMENT,
        collection_title_matches=(
            ("Medicare Public Provider",),
            ("Attorney Registrations",),
            ("Job Applications",),
        ),
    ),
    RecordTypeRule(
        record_type=RecordType.FAM_HIST_OR_PEDIGREE,
        collection_title_matches=(
            ("Biographies",),
            ("Genealogy of the",),
            ("Personal Reminiscences of",),
        ),
    ),
    RecordTypeRule(
        record_type=RecordType.MARRIAGE,
        required_fields=(("Marriage date", "Marriage place"), ("Marriage",)),
    ),
)

EVENT_LABELS: dict[RecordType, tuple[str, ...]] = {
    RecordType.BAPTISM: ("Christening", "Baptism"),
    RecordType.IMMIGRATION: ("Arrival",),
    RecordType.CENSUS: ("Residence",),
    RecordType.MARRIAGE: ("Marriage",),
    RecordType.DIVORCE: ("Divorce",),
}

EVENT_DATE_LABELS: dict[RecordType, tuple[str, ...]] = {
    RecordType.DIRECTORY: ("ABN last updated", "ABN status date"),
    RecordType.MARRIAGE: ("Marriage date",),
    RecordType.MARRIAGE_REGISTRATION: ("Marriage date",),
}

EVENT_PLACE_LABELS: dict[RecordType, tuple[str, ...]] = {
    RecordType.DIRECTORY: ("Residence",),
    RecordType.MARRIAGE: ("Marriage place",),
    RecordType.MARRIAGE_REGISTRATION: ("Marriage place",),
}

# Household table heading -> standard field name
HOUSEHOLD_FIELD_NAMES = {
    "Name": "name",
    "Age": "age",
    "Relation to head": "relationship",
}

COUPLE_RECORD_TYPES = {
    RecordType.MARRIAGE,
    RecordType.MARRIAGE_REGISTRATION,
    RecordType.DIVORCE,
}

IMPLIED_SUFFIX = " (implied)"

_YEAR_RE = re.compile(r"^\d{4}$")
_QUARTER_RE = re.compile(r"^[A-Z][a-z]{2}-[A-Z][a-z]{2}-[A-Z][a-z]{2}\s+\d{4}$")
_LONG_QUARTER_RE = re.compile(
    r"^([A-Z][a-z]{2})[a-z]*-([A-Z][a-z]{2})[a-z]*-([A-Z][a-z]{2})[a-z]*\s+(\d{4})$"
)
_MONTH_DAY_YEAR_RE = re.compile(r"^([A-Za-z][a-z]{2})\s+(\d{1,2})\s+(\d{4})$")


def clean_mh_date(date_string: str | None) -> str:
    """Normalize a MyHeritage date string.

    Years and "Jan-Feb-Mar 1881" quarters pass through, "July-Aug-Sep 1914"
    is shortened to three letter months and "Aug 22 1822" becomes
    "22 Aug 1822". Ranges ("Between ...") cannot be represented and give "".
    Any other form is kept as written.
    """
    if not date_string:
        return ""

    date_string = date_string.strip()

    if _YEAR_RE.match(date_string) or _QUARTER_RE.match(date_string):
        return date_string
    if date_string.startswith("Between"):
        return ""

    match = _LONG_QUARTER_RE.match(date_string)
    if match:
        return f"{match.group(1)}-{match.group(2)}-{match.group(3)} {match.group(4)}"

    match = _MONTH_DAY_YEAR_RE.match(date_string)
    if match:
        return f"{match.group(2)} {match.group(1)} {match.group(3)}"

    return date_string


def clean_mh_relationship(relationship: str | None) -> str:
    if not relationship:
        return ""
    if relationship.endswith(IMPLIED_SUFFIX):
        return relationship[: -len(IMPLIED_SUFFIX)]
    return relationship


class MyHeritageReader(ExtractedDataReader):
    """MyHeritage pages.

    ``recordData`` maps a field label to a value object with ``value`` and,
    for events, ``dateString`` and ``placeString``. Census records carry a
    ``household`` with ``headings`` and ``members``.
    """

    site_name = "myheritage"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.record_data: Mapping[str, Any] = ed.get("recordData") or {}
        if self.record_data:
            self._determine_source_type_and_record_type()

    def _determine_source_type_and_record_type(self) -> None:
        page_type = self.ed.get("pageType")
        if page_type == "person":
            self.source_type = SourceType.PROFILE
        elif page_type == "record":
            self.source_type = SourceType.RECORD
            sections = self.ed.get("recordSections") or {}
            data = ClassificationInput(
                document_type=self._value("Document type") or None,
                collection_title=self.ed.get("collectionTitle") or "",
                record_sections={name for name, value in sections.items() if value},
                fields={label for label, value in self.record_data.items() if value},
            )
            self.record_type, self.record_subtype = classify_record_type(RECORD_TYPE_RULES, data)

    def _value_obj(self, labels: tuple[str, ...] | None) -> Mapping[str, Any] | None:
        for label in labels or ():
            value = self.record_data.get(label)
            if value:
                return value
        return None

    def _value(self, label: str) -> str:
        value_obj = self.record_data.get(label)
        if value_obj and value_obj.get("value"):
            return str(value_obj["value"])
        return ""

    def _value_string(self, labels: tuple[str, ...]) -> str:
        value_obj = self._value_obj(labels)
        if value_obj and value_obj.get("value"):
            return str(value_obj["value"])
        return ""

    def _date_from(self, value_obj: Mapping[str, Any] | None) -> DateObj | None:
        if value_obj and value_obj.get("dateString"):
            return self.make_date_obj_from_date_string(clean_mh_date(value_obj["dateString"]))
        return None

    def _place_from(self, value_obj: Mapping[str, Any] | None) -> PlaceObj | None:
        if value_obj and value_obj.get("placeString"):
            return self.make_place_obj_from_full_place_name(value_obj["placeString"])
        return None

    def has_valid_data(self) -> bool:
        return bool(self.ed.get("success")) and bool(self.record_data)

    def get_name_obj(self) -> NameObj | None:
        name = self._value("Name") or (self.ed.get("recordTitle") or "")
        if " & " in name and self.record_type in COUPLE_RECORD_TYPES:
            name = name[: name.index(" & ")].strip()
        return self.make_name_obj_from_full_name(name)

    def get_gender(self) -> str:
        if self.ed.get("personGender"):
            return str(self.ed["personGender"])
        return self._value("Gender").lower()

    def get_event_date_obj(self) -> DateObj | None:
        date_string = ""
        event_value = self._value_obj(EVENT_LABELS.get(self.record_type))
        if event_value and event_value.get("dateString"):
            date_string = event_value["dateString"]
        if not date_string:
            date_value = self._value_obj(EVENT_DATE_LABELS.get(self.record_type))
            if date_value and date_value.get("value"):
                date_string = date_value["value"]
        return self.make_date_obj_from_date_string(clean_mh_date(date_string))

    def get_event_place_obj(self) -> PlaceObj | None:
        place = self._place_from(self._value_obj(EVENT_LABELS.get(self.record_type)))
        if place is None:
            place = self._place_from(self._value_obj(EVENT_PLACE_LABELS.get(self.record_type)))
        return place

    def get_birth_date_obj(self) -> DateObj | None:
        return self._date_from(self._value_obj(("Birth",)))

    def get_birth_place_obj(self) -> PlaceObj | None:
        return self._place_from(self._value_obj(("Birth",)))

    def get_death_date_obj(self) -> DateObj | None:
        return self._date_from(self._value_obj(("Death",)))

    def get_death_place_obj(self) -> PlaceObj | None:
        return self._place_from(self._value_obj(("Death",)))

    def get_relationship_to_head(self) -> str:
        household = self.ed.get("household")
        if not household or "Relation to head" not in (household.get("headings") or []):
            return ""
        for member in household.get("members") or []:
            if member.get("isSelected"):
                return standardize_relationship_to_head(clean_mh_relationship(member.get("Relation to head")))
        return ""

    def get_marital_status(self) -> str:
        return self._value_string(("Marital status",))

    def get_occupation(self) -> str:
        return self._value_string(("Occupation",))

    def get_spouse_obj(self) -> Spouse | None:
        # Census spouses are inferred from the household by the generalizer
        if self.record_type == RecordType.CENSUS:
            return None

        spouse_name = self._value_string(("Spouse", "Spouse (implied)"))
        if not spouse_name:
            bride_name = _name_from_value(self._value_obj(("Bride", "Wife")))
            groom_name = _name_from_value(self._value_obj(("Groom", "Husband")))
            name_obj = self.get_name_obj()
            if bride_name and groom_name and name_obj:
                if name_obj.name == groom_name:
                    spouse_name = bride_name
                elif name_obj.name == bride_name:
                    spouse_name = groom_name

        spouse_name_obj = self.make_name_obj_from_full_name(spouse_name)
        if not spouse_name_obj:
            return None

        if self.record_type in (RecordType.MARRIAGE, RecordType.MARRIAGE_REGISTRATION):
            return self.make_spouse_obj(
                spouse_name_obj, self.get_event_date_obj(), self.get_event_place_obj()
            )
        return self.make_spouse_obj(spouse_name_obj)

    def get_parents(self) -> Parents | None:
        if self.record_type == RecordType.CENSUS:
            return None

        father = self.make_name_obj_from_full_name(self._value("Father"))
        mother = self.make_name_obj_from_full_name(self._value("Mother"))
        if not father and not mother:
            return None
        return Parents(
            father=Parent(name=father) if father else None,
            mother=Parent(name=mother) if mother else None,
        )

    def get_household(self) -> Household | None:
        household = self.ed.get("household")
        if not household:
            return None
        headings = household.get("headings")
        members = household.get("members")
        if not headings or not members:
            return None

        result_members = []
        for member in members:
            if member.get("isClosed"):
                result_members.append(HouseholdMember(is_closed=True))
                continue
            values: dict[str, str] = {}
            for heading in headings:
                field_name = HOUSEHOLD_FIELD_NAMES.get(heading)
                value = member.get(heading)
                if field_name and value:
                    if field_name == "relationship":
                        value = standardize_relationship_to_head(clean_mh_relationship(value))
                    values[field_name] = str(value)
            result_members.append(
                HouseholdMember(values=values, is_selected=bool(member.get("isSelected")))
            )

        field_names = tuple(
            HOUSEHOLD_FIELD_NAMES[heading] for heading in headings if heading in HOUSEHOLD_FIELD_NAMES
        )
        return Household(field_names=field_names, members=tuple(result_members))


def _name_from_value(value_obj: Mapping[str, Any] | None) -> str:
    if not value_obj:
        return ""
    return str(value_obj.get("value") or value_obj.get("Name") or "")
