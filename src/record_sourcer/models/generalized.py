"""Generalized record data shared by every site."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from record_sourcer.models.date import DateObj
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import (
    SUBTYPE_REF_TITLES,
    RecordSubtype,
    RecordType,
    SourceType,
)

BIRTH_RECORD_TYPES = {
    RecordType.BIRTH,
    RecordType.BIRTH_REGISTRATION,
    RecordType.BAPTISM,
    RecordType.BIRTH_OR_BAPTISM,
}

DEATH_RECORD_TYPES = {
    RecordType.DEATH,
    RecordType.DEATH_REGISTRATION,
    RecordType.BURIAL,
    RecordType.CREMATION,
    RecordType.OBITUARY,
    RecordType.MEMORIAL,
}

MARRIAGE_RECORD_TYPES = {
    RecordType.MARRIAGE,
    RecordType.MARRIAGE_REGISTRATION,
}


class Parent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: NameObj


class Parents(BaseModel):
    """Father and mother of a person, either of which may be unknown."""

    model_config = ConfigDict(frozen=True)

    father: Parent | None = None
    mother: Parent | None = None


class Spouse(BaseModel):
    """A spouse named in a record, with the marriage details if known."""

    model_config = ConfigDict(frozen=True)

    name: NameObj | None = None
    marriage_date: DateObj | None = None
    marriage_place: PlaceObj | None = None
    age: str = ""
    person_gender: str = ""
    parents: Parents | None = None


class HouseholdMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: dict[str, str] = Field(default_factory=dict, description="Standard field name to value")
    is_selected: bool = Field(default=False, description="This member is the record's primary person")
    is_closed: bool = Field(default=False, description="Details withheld for privacy")
    link: str | None = None

    def get(self, field: str) -> str:
        return self.values.get(field, "")


class Household(BaseModel):
    """Co-residents listed in a census-like record."""

    model_config = ConfigDict(frozen=True)

    field_names: tuple[str, ...] = Field(default=(), description="Ordered standard field names")
    members: tuple[HouseholdMember, ...] = ()

    def get_selected_member(self) -> HouseholdMember | None:
        for member in self.members:
            if member.is_selected:
                return member
        return None


class CollectionData(BaseModel):
    """Identifiers of the collection a record belongs to."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    volume: str = ""
    page: str = ""
    extra: dict[str, str] = Field(default_factory=dict, description="Other site specific identifiers")


class GeneralizedData(BaseModel):
    """Site independent view of one extracted record.

    Built once from a reader and never modified; merging linked records
    produces a new instance.
    """

    model_config = ConfigDict(frozen=True)

    source_of_data: str = Field(default="", description="Site the record came from")
    source_type: SourceType | None = None
    record_type: RecordType = RecordType.UNCLASSIFIED
    record_subtype: RecordSubtype | None = None

    name: NameObj | None = None
    person_gender: str = ""
    event_date: DateObj | None = None
    event_place: PlaceObj | None = None
    birth_date: DateObj | None = None
    birth_place: PlaceObj | None = None
    death_date: DateObj | None = None
    death_place: PlaceObj | None = None

    last_name_at_birth: str = ""
    last_name_at_death: str = ""
    mothers_maiden_name: str = ""
    age_at_event: str = ""
    age_at_death: str = ""
    registration_district: str = ""
    relationship_to_head: str = ""
    marital_status: str = ""
    occupation: str = ""

    collection_data: CollectionData | None = None
    spouses: tuple[Spouse, ...] = ()
    parents: Parents | None = None
    household: Household | None = None

    def infer_full_name(self) -> str:
        return self.name.infer_full_name() if self.name else ""

    def infer_forenames(self) -> str:
        return self.name.infer_forenames() if self.name else ""

    def infer_first_name(self) -> str:
        return self.name.infer_first_name() if self.name else ""

    def infer_last_name(self) -> str:
        if self.name:
            last_name = self.name.infer_last_name()
            if last_name:
                return last_name
        return self.last_name_at_death or self.last_name_at_birth

    def infer_event_date_obj(self) -> DateObj | None:
        if self.event_date:
            return self.event_date
        if self.record_type in BIRTH_RECORD_TYPES:
            return self.birth_date
        if self.record_type in DEATH_RECORD_TYPES:
            return self.death_date
        if self.record_type in MARRIAGE_RECORD_TYPES:
            for spouse in self.spouses:
                if spouse.marriage_date:
                    return spouse.marriage_date
        return None

    def infer_event_date(self) -> str:
        date_obj = self.infer_event_date_obj()
        return date_obj.get_date_string() if date_obj else ""

    def infer_event_year(self) -> int | None:
        date_obj = self.infer_event_date_obj()
        return date_obj.get_year() if date_obj else None

    def infer_event_place(self) -> str:
        if self.event_place:
            return self.event_place.infer_place_string()
        if self.record_type in BIRTH_RECORD_TYPES and self.birth_place:
            return self.birth_place.infer_place_string()
        if self.record_type in DEATH_RECORD_TYPES and self.death_place:
            return self.death_place.infer_place_string()
        return ""

    def get_ref_title(self) -> str:
        if self.record_subtype is not None:
            return SUBTYPE_REF_TITLES.get(self.record_subtype, self.record_type.ref_title)
        return self.record_type.ref_title

    def has_household_table(self) -> bool:
        return bool(self.household and self.household.field_names and self.household.members)
