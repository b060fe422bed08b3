"""Build GeneralizedData from a site reader."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from record_sourcer.exceptions import InvalidExtractedDataError
from record_sourcer.logging import get_logger
from record_sourcer.models.generalized import (
    GeneralizedData,
    Household,
    HouseholdMember,
    Parent,
    Parents,
    Spouse,
)
from record_sourcer.models.name import make_name_obj_from_full_name
from record_sourcer.models.record_type import RecordType
from record_sourcer.readers.base import RecordReader
from record_sourcer.readers.registry import Site, get_reader

logger = get_logger(__name__)

HOUSEHOLD_RECORD_TYPES = {RecordType.CENSUS, RecordType.POPULATION_REGISTER}
CHILD_RELATIONSHIPS = {"son", "daughter"}
SPOUSE_RELATIONSHIPS = {"wife", "husband"}


def _member_name(member: HouseholdMember) -> str:
    return member.get("name") or " ".join(
        part for part in (member.get("forenames"), member.get("lastName")) if part
    )


def _find_member(household: Household, relationships: set[str]) -> HouseholdMember | None:
    for member in household.members:
        if not member.is_selected and member.get("relationship") in relationships:
            return member
    return None


def infer_spouse_from_household(household: Household, relationship_to_head: str) -> Spouse | None:
    """Find the spouse of the selected member in a census household.

    Only the head and the head's wife or husband can be paired this way.
    """
    if relationship_to_head == "head":
        partner = _find_member(household, SPOUSE_RELATIONSHIPS)
    elif relationship_to_head in SPOUSE_RELATIONSHIPS:
        partner = _find_member(household, {"head"})
    else:
        return None
    if partner is None:
        return None
    name_obj = make_name_obj_from_full_name(_member_name(partner))
    if name_obj is None:
        return None
    gender = partner.get("gender")
    if not gender:
        gender = {"wife": "female", "husband": "male"}.get(partner.get("relationship"), "")
    return Spouse(name=name_obj, age=partner.get("age"), person_gender=gender)


def infer_parents_from_household(household: Household, relationship_to_head: str) -> Parents | None:
    """Treat the head and the head's wife as the parents of a son or daughter of the head."""
    if relationship_to_head not in CHILD_RELATIONSHIPS:
        return None
    head = _find_member(household, {"head"})
    wife = _find_member(household, {"wife"})
    if head is None:
        return None
    head_name = make_name_obj_from_full_name(_member_name(head))
    wife_name = make_name_obj_from_full_name(_member_name(wife)) if wife else None
    if head_name is None:
        return None

    head_gender = head.get("gender")
    if head_gender == "female" and wife is None:
        return Parents(mother=Parent(name=head_name))
    if not head_gender and wife is None:
        return None
    return Parents(
        father=Parent(name=head_name),
        mother=Parent(name=wife_name) if wife_name else None,
    )


def generalize_data(reader: RecordReader, source_of_data: str | None = None) -> GeneralizedData:
    """Call every reader accessor in a fixed order and build a GeneralizedData.

    For census-like records the spouse and parents are inferred from the
    household when the reader does not name them.
    """
    record_type = reader.get_record_type()
    relationship_to_head = reader.get_relationship_to_head()
    household = reader.get_household()

    spouses = list(reader.get_spouses())
    parents = reader.get_parents()
    if record_type in HOUSEHOLD_RECORD_TYPES and household is not None:
        selected = household.get_selected_member()
        relationship = relationship_to_head or (selected.get("relationship") if selected else "")
        if not spouses:
            spouse = infer_spouse_from_household(household, relationship)
            if spouse is not None:
                spouses.append(spouse)
        if parents is None:
            parents = infer_parents_from_household(household, relationship)

    gd = GeneralizedData(
        source_of_data=source_of_data or reader.site_name,
        source_type=reader.get_source_type(),
        record_type=record_type,
        record_subtype=reader.get_record_subtype(),
        name=reader.get_name_obj(),
        person_gender=reader.get_gender() or "",
        event_date=reader.get_event_date_obj(),
        event_place=reader.get_event_place_obj(),
        birth_date=reader.get_birth_date_obj(),
        birth_place=reader.get_birth_place_obj(),
        death_date=reader.get_death_date_obj(),
        death_place=reader.get_death_place_obj(),
        last_name_at_birth=reader.get_last_name_at_birth() or "",
        last_name_at_death=reader.get_last_name_at_death() or "",
        mothers_maiden_name=reader.get_mothers_maiden_name() or "",
        age_at_event=reader.get_age_at_event() or "",
        age_at_death=reader.get_age_at_death() or "",
        registration_district=reader.get_registration_district() or "",
        relationship_to_head=relationship_to_head or "",
        marital_status=reader.get_marital_status() or "",
        occupation=reader.get_occupation() or "",
        collection_data=reader.get_collection_data(),
        spouses=tuple(spouses),
        parents=parents,
        household=household,
    )
    logger.debug(
        "generalized record",
        site=gd.source_of_data,
        record_type=gd.record_type.value,
        has_household=gd.has_household_table(),
    )
    return gd


def generalize_extracted_data(site: Site | str, ed: Mapping[str, Any]) -> GeneralizedData:
    """Generalize extracted data for a site.

    Raises:
        InvalidExtractedDataError: the reader cannot interpret ``ed``
    """
    reader = get_reader(site, ed)
    if not reader.has_valid_data():
        logger.info("extracted data rejected", site=reader.site_name)
        raise InvalidExtractedDataError(site=reader.site_name)
    return generalize_data(reader)


class LinkedRole(str, Enum):
    FATHER = "father"
    MOTHER = "mother"
    SPOUSE = "spouse"
    HOUSEHOLD_MEMBER = "householdMember"


class LinkedRecord(BaseModel):
    """A separately fetched record for someone linked from the main record."""

    model_config = ConfigDict(frozen=True)

    link: str
    role: LinkedRole
    data: GeneralizedData


def _merge_member(member: HouseholdMember, linked: GeneralizedData) -> HouseholdMember:
    values = dict(member.values)
    additions = {
        "name": linked.infer_full_name(),
        "gender": linked.person_gender,
        "age": linked.age_at_event,
        "birthDate": linked.birth_date.get_date_string() if linked.birth_date else "",
        "birthPlace": linked.birth_place.infer_place_string() if linked.birth_place else "",
        "occupation": linked.occupation,
        "maritalStatus": linked.marital_status,
    }
    for key, value in additions.items():
        if value and not values.get(key):
            values[key] = value
    return member.model_copy(update={"values": values})


def regeneralize_with_linked_records(
    gd: GeneralizedData, linked_records: Sequence[LinkedRecord]
) -> GeneralizedData:
    """Return a new GeneralizedData with details filled in from linked records.

    Existing values are kept; linked records only fill gaps. ``gd`` itself
    is not modified.
    """
    update: dict[str, Any] = {}

    father = gd.parents.father if gd.parents else None
    mother = gd.parents.mother if gd.parents else None
    spouses = list(gd.spouses)
    by_link = {}

    for record in linked_records:
        name_obj = record.data.name
        if record.role == LinkedRole.FATHER and father is None and name_obj:
            father = Parent(name=name_obj)
        elif record.role == LinkedRole.MOTHER and mother is None and name_obj:
            mother = Parent(name=name_obj)
        elif record.role == LinkedRole.SPOUSE and name_obj:
            known = {spouse.name.name for spouse in spouses if spouse.name}
            if name_obj.name not in known:
                spouses.append(
                    Spouse(name=name_obj, person_gender=record.data.person_gender)
                )
        elif record.role == LinkedRole.HOUSEHOLD_MEMBER:
            by_link[record.link] = record.data

    if father or mother:
        parents = Parents(father=father, mother=mother)
        if parents != gd.parents:
            update["parents"] = parents
    if len(spouses) != len(gd.spouses):
        update["spouses"] = tuple(spouses)

    if gd.household and by_link:
        members = tuple(
            _merge_member(member, by_link[member.link]) if member.link in by_link else member
            for member in gd.household.members
        )
        field_names = list(gd.household.field_names)
        for member in members:
            for key in member.values:
                if key not in field_names:
                    field_names.append(key)
        update["household"] = gd.household.model_copy(
            update={"members": members, "field_names": tuple(field_names)}
        )

    if not update:
        return gd
    logger.debug("regeneralized with linked records", fields=sorted(update))
    return gd.model_copy(update=update)
