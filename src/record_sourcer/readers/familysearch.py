"""Reader for FamilySearch historical records fetched as GedcomX."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import Household, HouseholdMember, Parent, Parents, Spouse
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import RecordType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.readers.gedcomx import Fact, GedcomxRecord, Person, Relationship

logger = logging.getLogger(__name__)

# Simplified GedcomX fact type -> record type, in priority order
FACT_RECORD_TYPES: tuple[tuple[str, RecordType], ...] = (
    ("census", RecordType.CENSUS),
    ("marriage", RecordType.MARRIAGE),
    ("christening", RecordType.BAPTISM),
    ("baptism", RecordType.BAPTISM),
    ("burial", RecordType.BURIAL),
    ("death", RecordType.DEATH),
    ("birth", RecordType.BIRTH),
    ("immigration", RecordType.IMMIGRATION),
    ("emigration", RecordType.EMIGRATION),
    ("naturalization", RecordType.NATURALIZATION),
    ("militaryservice", RecordType.MILITARY),
    ("militarydraftregistration", RecordType.MILITARY),
    ("probate", RecordType.PROBATE),
    ("will", RecordType.WILL),
    ("residence", RecordType.RESIDENCE),
)

COLLECTION_TITLE_RECORD_TYPES: tuple[tuple[str, RecordType], ...] = (
    ("Census", RecordType.CENSUS),
    ("Social Security", RecordType.SOCIAL_SECURITY),
    ("Passenger", RecordType.PASSENGER_LIST),
    ("Probate", RecordType.PROBATE),
)

_ARK_RE = re.compile(r"ark:/61903/1:1:([A-Z0-9-]+)")


def extract_data_from_fetch(data_obj: Mapping[str, Any], url: str = "") -> dict[str, Any]:
    """Build extracted data for the reader from a fetched GedcomX record."""
    ed: dict[str, Any] = {"success": False, "url": url}
    try:
        record = GedcomxRecord.from_json(dict(data_obj))
    except ValidationError as e:
        logger.warning("FamilySearch record at %s is not valid GedcomX: %s", url, e)
        return ed
    if not record.persons:
        return ed
    ed.update(success=True, gedcomx=dict(data_obj), collectionTitle=record.collection_title)
    match = _ARK_RE.search(url)
    if match:
        ed["recordId"] = match.group(1)
    return ed


class FamilysearchReader(ExtractedDataReader):
    """FamilySearch records: ``gedcomx`` holds the record document."""

    site_name = "familysearch"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.record: GedcomxRecord | None = None
        self.person: Person | None = None
        if ed.get("success") and ed.get("gedcomx"):
            try:
                self.record = GedcomxRecord.from_json(ed["gedcomx"])
            except ValidationError as e:
                logger.warning("Could not read GedcomX record: %s", e)
        if self.record:
            self.person = self.record.principal_person
            self.record_type = self._determine_record_type()

    def _determine_record_type(self) -> RecordType:
        title = self.ed.get("collectionTitle") or ""
        for part, record_type in COLLECTION_TITLE_RECORD_TYPES:
            if part in title:
                return record_type

        fact_types = {fact.fact_type for fact in self._person_facts()}
        for relationship in self._couple_relationships():
            fact_types.update(fact.fact_type for fact in relationship.facts)
        for fact_type, record_type in FACT_RECORD_TYPES:
            if fact_type in fact_types:
                return record_type
        return RecordType.UNCLASSIFIED

    def _person_facts(self) -> list[Fact]:
        return self.person.facts if self.person else []

    def _couple_relationships(self) -> list[Relationship]:
        if not self.record or not self.person:
            return []
        return [
            rel
            for rel in self.record.relationships
            if rel.relationship_type == "couple"
            and self.person.id in (
                rel.person1.person_id if rel.person1 else None,
                rel.person2.person_id if rel.person2 else None,
            )
        ]

    def _event_fact(self) -> Fact | None:
        wanted = [ft for ft, rt in FACT_RECORD_TYPES if rt == self.record_type]
        for fact in self._person_facts():
            if fact.fact_type in wanted:
                return fact
        for relationship in self._couple_relationships():
            for fact in relationship.facts:
                if fact.fact_type in wanted:
                    return fact
        for fact in self._person_facts():
            if fact.primary:
                return fact
        return None

    def _fact(self, *fact_types: str) -> Fact | None:
        for fact_type in fact_types:
            fact = self.person.get_fact(fact_type) if self.person else None
            if fact:
                return fact
        return None

    def _date_from(self, fact: Fact | None) -> DateObj | None:
        if fact and fact.date:
            return self.make_date_obj_from_date_string(fact.date.original or fact.date.formal)
        return None

    def _place_from(self, fact: Fact | None) -> PlaceObj | None:
        if fact and fact.place:
            return self.make_place_obj_from_full_place_name(fact.place.original)
        return None

    def _name_obj_for(self, person: Person | None) -> NameObj | None:
        if not person:
            return None
        full_name = person.display_name
        given, surname = person.given_name or "", person.surname or ""
        if given and surname and f"{given} {surname}" == full_name:
            return self.make_name_obj_from_forenames_and_last_name(given, surname)
        return self.make_name_obj_from_full_name(full_name)

    def has_valid_data(self) -> bool:
        return self.person is not None

    def get_name_obj(self) -> NameObj | None:
        return self._name_obj_for(self.person)

    def get_gender(self) -> str:
        return self.person.gender_value if self.person else ""

    def get_event_date_obj(self) -> DateObj | None:
        return self._date_from(self._event_fact())

    def get_event_place_obj(self) -> PlaceObj | None:
        return self._place_from(self._event_fact())

    def get_birth_date_obj(self) -> DateObj | None:
        return self._date_from(self._fact("birth", "christening"))

    def get_birth_place_obj(self) -> PlaceObj | None:
        return self._place_from(self._fact("birth", "christening"))

    def get_death_date_obj(self) -> DateObj | None:
        return self._date_from(self._fact("death", "burial"))

    def get_death_place_obj(self) -> PlaceObj | None:
        return self._place_from(self._fact("death", "burial"))

    def get_age_at_event(self) -> str:
        fact = self._fact("age")
        return (fact.value or "") if fact else ""

    def get_occupation(self) -> str:
        fact = self._fact("occupation")
        return (fact.value or "") if fact else ""

    def get_marital_status(self) -> str:
        fact = self._fact("maritalstatus")
        return (fact.value or "").lower() if fact else ""

    def get_spouses(self) -> list[Spouse]:
        spouses = []
        for relationship in self._couple_relationships():
            ids = [ref.person_id for ref in (relationship.person1, relationship.person2) if ref]
            other_id = next((pid for pid in ids if pid != self.person.id), None)
            other = self.record.get_person(other_id) if self.record else None
            marriage = next((f for f in relationship.facts if f.fact_type == "marriage"), None)
            spouse = self.make_spouse_obj(
                self._name_obj_for(other),
                self._date_from(marriage),
                self._place_from(marriage),
                person_gender=other.gender_value if other else "",
            )
            if spouse:
                spouses.append(spouse)
        return spouses

    def get_spouse_obj(self) -> Spouse | None:
        spouses = self.get_spouses()
        return spouses[0] if spouses else None

    def get_parents(self) -> Parents | None:
        if not self.record or not self.person:
            return None
        father = mother = None
        for relationship in self.record.relationships:
            if relationship.relationship_type != "parentchild":
                continue
            if not relationship.person2 or relationship.person2.person_id != self.person.id:
                continue
            parent = self.record.get_person(relationship.person1.person_id if relationship.person1 else None)
            name_obj = self._name_obj_for(parent)
            if not parent or not name_obj:
                continue
            if parent.gender_value == "female" and mother is None:
                mother = Parent(name=name_obj)
            elif parent.gender_value != "female" and father is None:
                father = Parent(name=name_obj)
        if not father and not mother:
            return None
        return Parents(father=father, mother=mother)

    def get_household(self) -> Household | None:
        if self.record_type != RecordType.CENSUS or not self.record or len(self.record.persons) < 2:
            return None
        members = []
        for person in self.record.persons:
            values = {"name": person.display_name}
            if person.gender_value:
                values["gender"] = person.gender_value
            age = person.get_fact("age")
            if age and age.value:
                values["age"] = age.value
            members.append(HouseholdMember(values=values, is_selected=person is self.person))
        field_names = ["name"]
        for field_name in ("gender", "age"):
            if any(field_name in member.values for member in members):
                field_names.append(field_name)
        return Household(field_names=tuple(field_names), members=tuple(members))

    def get_record_id(self) -> str:
        return self._str("recordId")
