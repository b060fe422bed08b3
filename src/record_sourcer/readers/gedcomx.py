"""Pydantic models for the parts of a GedcomX record document we read.

FamilySearch returns historical records as GedcomX JSON: the persons on
the record, the relationships between them and descriptions of the record
and its collection.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def _last_uri_part(uri: str) -> str:
    return uri.split("/")[-1].lower()


class NamePart(BaseModel):
    """A part of a person's name (given, surname, etc.)."""

    type: str = ""
    value: str = ""

    @property
    def part_type(self) -> str:
        """Get simplified type name."""
        return _last_uri_part(self.type)


class NameForm(BaseModel):
    """A form of a person's name."""

    model_config = {"populate_by_name": True}

    full_text: str | None = Field(None, alias="fullText")
    parts: list[NamePart] = []


class Name(BaseModel):
    """A person's name."""

    model_config = {"populate_by_name": True}

    name_forms: list[NameForm] = Field(default_factory=list, alias="nameForms")
    preferred: bool = False

    @property
    def full_name(self) -> str | None:
        if self.name_forms and self.name_forms[0].full_text:
            return self.name_forms[0].full_text
        return None

    def _part(self, part_type: str) -> str | None:
        if not self.name_forms:
            return None
        for part in self.name_forms[0].parts:
            if part.part_type == part_type:
                return part.value
        return None

    @property
    def given_name(self) -> str | None:
        return self._part("given")

    @property
    def surname(self) -> str | None:
        return self._part("surname")


class DateInfo(BaseModel):
    """Date information."""

    original: str | None = None
    formal: str | None = None


class PlaceInfo(BaseModel):
    """Place information."""

    original: str | None = None


class Fact(BaseModel):
    """A fact about a person or relationship (birth, death, marriage, etc.)."""

    type: str = ""
    date: DateInfo | None = None
    place: PlaceInfo | None = None
    value: str | None = None
    primary: bool = False

    @property
    def fact_type(self) -> str:
        """Get simplified fact type."""
        return _last_uri_part(self.type)


class Gender(BaseModel):
    """Gender information."""

    type: str = ""

    @property
    def value(self) -> str:
        return _last_uri_part(self.type)


class ResourceReference(BaseModel):
    model_config = {"populate_by_name": True}

    resource: str | None = None
    resource_id: str | None = Field(None, alias="resourceId")

    @property
    def person_id(self) -> str | None:
        if self.resource_id:
            return self.resource_id
        if self.resource and "#" in self.resource:
            return self.resource.split("#")[-1]
        return None


class Person(BaseModel):
    """A person on a record."""

    id: str = ""
    principal: bool = False
    names: list[Name] = []
    gender: Gender | None = None
    facts: list[Fact] = []

    @property
    def display_name(self) -> str:
        for name in self.names:
            if name.preferred and name.full_name:
                return name.full_name
        if self.names and self.names[0].full_name:
            return self.names[0].full_name
        return ""

    @property
    def given_name(self) -> str | None:
        for name in self.names:
            if name.given_name:
                return name.given_name
        return None

    @property
    def surname(self) -> str | None:
        for name in self.names:
            if name.surname:
                return name.surname
        return None

    @property
    def gender_value(self) -> str:
        value = self.gender.value if self.gender else ""
        return value if value in ("male", "female") else ""

    def get_fact(self, fact_type: str) -> Fact | None:
        """Get a specific fact by type."""
        for fact in self.facts:
            if fact.fact_type == fact_type.lower():
                return fact
        return None


class Relationship(BaseModel):
    type: str = ""
    person1: ResourceReference | None = None
    person2: ResourceReference | None = None
    facts: list[Fact] = []

    @property
    def relationship_type(self) -> str:
        return _last_uri_part(self.type)


class TextValue(BaseModel):
    value: str = ""


class SourceDescription(BaseModel):
    model_config = {"populate_by_name": True}

    id: str | None = None
    about: str | None = None
    resource_type: str | None = Field(None, alias="resourceType")
    titles: list[TextValue] = []
    citations: list[TextValue] = []

    @property
    def title(self) -> str:
        return self.titles[0].value if self.titles else ""


class GedcomxRecord(BaseModel):
    """A GedcomX document for one historical record."""

    model_config = {"populate_by_name": True}

    persons: list[Person] = []
    relationships: list[Relationship] = []
    source_descriptions: list[SourceDescription] = Field(default_factory=list, alias="sourceDescriptions")

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GedcomxRecord:
        return cls.model_validate(data)

    def get_person(self, person_id: str | None) -> Person | None:
        for person in self.persons:
            if person.id == person_id:
                return person
        return None

    @property
    def principal_person(self) -> Person | None:
        for person in self.persons:
            if person.principal:
                return person
        return self.persons[0] if self.persons else None

    @property
    def collection_title(self) -> str:
        for description in self.source_descriptions:
            if description.resource_type and _last_uri_part(description.resource_type) == "collection":
                return description.title
        return ""

    @property
    def record_citation(self) -> str:
        for description in self.source_descriptions:
            if description.citations:
                return description.citations[0].value
        return ""
