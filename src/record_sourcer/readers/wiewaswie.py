"""Reader for WieWasWie (Dutch archives portal) source detail pages."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import Household, HouseholdMember, Parents, Spouse
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import RecordSubtype, RecordType, SourceType
from record_sourcer.readers.base import ExtractedDataReader
from record_sourcer.utils.name_utils import collapse_whitespace

SourceField = Mapping[str, str]
PersonFields = Sequence[SourceField]

URL_PREFIX = "https://www.wiewaswie.nl/"

# Field types looked up through the per-language label tables
FULL_NAME = "fullName"
FORENAMES = "forenames"
GENDER = "gender"
AGE = "age"
PERSON_FATHER = "personFather"
PERSON_MOTHER = "personMother"
PERSON_BRIDE = "personBride"
PERSON_BRIDE_FATHER = "personBrideFather"
PERSON_BRIDE_MOTHER = "personBrideMother"
PERSON_SPOUSE = "personSpouse"


@dataclass(frozen=True)
class DocumentTypeInfo:
    en_document_type: str
    record_type: RecordType | None = None
    record_subtype: RecordSubtype | None = None
    record_type_from_event: Mapping[str, RecordType] = field(default_factory=dict)
    fixed_gender: str = ""
    name_format: str = ""
    labels: Mapping[str, Mapping[str, tuple[str, ...]]] = field(default_factory=dict)


_GROOM_LABELS = {
    "en": {
        FULL_NAME: ("Groom",),
        AGE: ("Age",),
        PERSON_BRIDE: ("Bride",),
        PERSON_FATHER: ("Father of the groom",),
        PERSON_MOTHER: ("Mother of the groom",),
        PERSON_BRIDE_FATHER: ("Father of the bride",),
        PERSON_BRIDE_MOTHER: ("Mother of the bride",),
    },
    "nl": {
        FULL_NAME: ("Bruidegom",),
        AGE: ("Leeftijd",),
        PERSON_BRIDE: ("Bruid",),
        PERSON_FATHER: ("Vader van de bruidegom",),
        PERSON_MOTHER: ("Moeder van de bruidegom",),
        PERSON_BRIDE_FATHER: ("Vader van de bruid",),
        PERSON_BRIDE_MOTHER: ("Moeder van de bruid",),
    },
}

DOCUMENT_TYPES: dict[str, DocumentTypeInfo] = {
    "BS Geboorte": DocumentTypeInfo(
        en_document_type="Birth certificates",
        record_type=RecordType.BIRTH_REGISTRATION,
        name_format="full",
        labels={
            "en": {
                FULL_NAME: ("Child",),
                GENDER: ("Gender",),
                PERSON_FATHER: ("Father",),
                PERSON_MOTHER: ("Mother",),
            },
            "nl": {
                FULL_NAME: ("Kind",),
                GENDER: ("Geslacht",),
                PERSON_FATHER: ("Vader",),
                PERSON_MOTHER: ("Moeder",),
            },
        },
    ),
    # The primary person of a marriage is always the groom
    "BS Huwelijk": DocumentTypeInfo(
        en_document_type="Marriage certificates",
        record_type=RecordType.MARRIAGE,
        fixed_gender="male",
        name_format="full",
        labels=_GROOM_LABELS,
    ),
    "BS Overlijden": DocumentTypeInfo(
        en_document_type="Death certificates",
        record_type=RecordType.DEATH_REGISTRATION,
        name_format="full",
        labels={
            "en": {
                FULL_NAME: ("Deceased",),
                GENDER: ("Gender",),
                AGE: ("Age",),
                PERSON_FATHER: ("Father",),
                PERSON_MOTHER: ("Mother",),
            },
            "nl": {
                FULL_NAME: ("Overledene",),
                GENDER: ("Geslacht",),
                AGE: ("Leeftijd",),
                PERSON_FATHER: ("Vader",),
                PERSON_MOTHER: ("Moeder",),
            },
        },
    ),
    "DTB Dopen": DocumentTypeInfo(
        en_document_type="Baptismal Registers",
        record_type=RecordType.BAPTISM,
        name_format="forenamesOnly",
        labels={
            "en": {
                FORENAMES: ("Dopeling",),
                PERSON_FATHER: ("Father",),
                PERSON_MOTHER: ("Mother",),
            },
            "nl": {
                FORENAMES: ("Dopeling",),
                PERSON_FATHER: ("Vader",),
                PERSON_MOTHER: ("Moeder",),
            },
        },
    ),
    "DTB Trouwen": DocumentTypeInfo(
        en_document_type="Marriage Registers",
        record_type=RecordType.MARRIAGE,
        fixed_gender="male",
        name_format="full",
        labels=_GROOM_LABELS,
    ),
    "DTB Begraven": DocumentTypeInfo(
        en_document_type="Burial Registers",
        record_type=RecordType.BURIAL,
        name_format="full",
        labels={
            "en": {
                FULL_NAME: ("Deceased",),
                GENDER: ("Gender",),
                AGE: ("Age",),
                PERSON_SPOUSE: ("Widow",),
                PERSON_FATHER: ("Father",),
                PERSON_MOTHER: ("Mother",),
            },
            "nl": {
                FULL_NAME: ("Overledene",),
                GENDER: ("Geslacht",),
                AGE: ("Leeftijd",),
                PERSON_SPOUSE: ("Weduwe",),
                PERSON_FATHER: ("Vader",),
                PERSON_MOTHER: ("Moeder",),
            },
        },
    ),
    "DTB Overig": DocumentTypeInfo(
        en_document_type="Church Membership Registers",
        record_type=RecordType.OTHER_CHURCH_EVENT,
        record_subtype=RecordSubtype.MEMBER_REGISTRATION,
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Man:",), GENDER: ("Gender",), PERSON_SPOUSE: ("Wife",)},
            "nl": {FULL_NAME: ("Man:",), GENDER: ("Geslacht",), PERSON_SPOUSE: ("Vrouw",)},
        },
    ),
    "Beroep en bedrijf": DocumentTypeInfo(
        en_document_type="Profession and Business",
        record_type=RecordType.EMPLOYMENT,
        name_format="full",
        labels={
            "en": {
                FULL_NAME: ("Registered", "Opvarende"),
                GENDER: ("Gender",),
                PERSON_SPOUSE: ("Wife",),
            },
            "nl": {
                FULL_NAME: ("Geregistreerde", "Opvarende"),
                GENDER: ("Geslacht",),
                PERSON_SPOUSE: ("Vrouw",),
            },
        },
    ),
    "Bevolkingsregister": DocumentTypeInfo(
        en_document_type="Population Registers",
        record_type=RecordType.POPULATION_REGISTER,
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Registered", "Persoon in bevolkingsregister")},
            "nl": {FULL_NAME: ("Geregistreerde", "Persoon in bevolkingsregister")},
        },
    ),
    "Bidprentjes": DocumentTypeInfo(
        en_document_type="Prayer Cards",
        record_type=RecordType.DEATH,
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Deceased",), PERSON_SPOUSE: ("Partner",)},
            "nl": {FULL_NAME: ("Overledene",), PERSON_SPOUSE: ("Partner",)},
        },
    ),
    "Collecties": DocumentTypeInfo(
        en_document_type="Miscellaneous Collections",
        record_type=RecordType.UNCLASSIFIED,
    ),
    "Familieadvertenties": DocumentTypeInfo(
        en_document_type="Family Announcements",
        record_type_from_event={"Geboorte": RecordType.BIRTH, "Overlijden": RecordType.DEATH},
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Main character",)},
            "nl": {FULL_NAME: ("Hoofdpersoon",)},
        },
    ),
    "Fiscaal en financieel": DocumentTypeInfo(
        en_document_type="Tax and Financial Registers",
        record_type_from_event={
            "Haardstedegeld": RecordType.TAX,
            "patentvermelding": RecordType.PATENT,
            "Grondschatting": RecordType.LAND_TAX,
        },
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Vermeld", "Aangeslagene", "Resident")},
            "nl": {FULL_NAME: ("Vermeld", "Aangeslagene", "Bewoner")},
        },
    ),
    "Instellingsregister": DocumentTypeInfo(
        en_document_type="Institutional Registers",
        record_type=RecordType.UNCLASSIFIED,
    ),
    "Memories van Successie": DocumentTypeInfo(
        en_document_type="Death Duties Files",
        record_type=RecordType.DEATH,
        name_format="full",
        labels={
            "en": {FULL_NAME: ("Deceased",)},
            "nl": {FULL_NAME: ("Overledene",)},
        },
    ),
    "Militairen": DocumentTypeInfo(en_document_type="Military sources", record_type=RecordType.MILITARY),
    "Misdaad en straf": DocumentTypeInfo(
        en_document_type="Crime and Punishment", record_type=RecordType.CRIMINAL_REGISTER
    ),
    "Notariële archieven": DocumentTypeInfo(
        en_document_type="Notarial Archives", record_type=RecordType.UNCLASSIFIED
    ),
    "Onroerend goed": DocumentTypeInfo(en_document_type="Real Estate", record_type=RecordType.UNCLASSIFIED),
    "Rechterlijke archieven": DocumentTypeInfo(
        en_document_type="Court Registers", record_type=RecordType.UNCLASSIFIED
    ),
    "Sociale zorg": DocumentTypeInfo(en_document_type="Social Care", record_type=RecordType.UNCLASSIFIED),
    "Slavernijbronnen": DocumentTypeInfo(
        en_document_type="Slavery Records", record_type=RecordType.UNCLASSIFIED
    ),
    "Tweede Wereldoorlog": DocumentTypeInfo(en_document_type="World War II", record_type=RecordType.MILITARY),
    "Vestiging en vertrek": DocumentTypeInfo(
        en_document_type="Migration",
        record_type_from_event={"Vertrek": RecordType.EMIGRATION},
    ),
    "VOC Opvarenden": DocumentTypeInfo(
        en_document_type="Dutch East India Company Passengers",
        record_type=RecordType.PASSENGER_LIST,
    ),
}

# Dutch surname particles; the last name starts at the first one found
TUSSENVOEGSELS = {
    "van", "de", "der", "den", "het", "'t", "ter", "ten", "te", "in", "op",
    "onder", "over", "uit", "aan", "bij", "la", "le", "du", "d'", "von", "zu", "vander",
}

NAME_PREFIXES = ("de erfgenamen van ", "+ ")
NAME_SEPARATORS = (" wed ", " wed. ", " wedr ", "wedr. ", ", ")
NAME_ENDINGS = (",", ".")

_COLLECTION_REMAINDER_RE = re.compile(r",\s+[^,:]+:")


def separate_full_name_into_parts(full_name: str) -> tuple[str, str]:
    """Split "Jan Hendrik van der Berg" into ("Jan Hendrik", "van der Berg")."""
    words = collapse_whitespace(full_name).split(" ")
    if len(words) < 2:
        return "", words[0] if words else ""
    for index in range(1, len(words) - 1):
        if words[index].lower() in TUSSENVOEGSELS:
            return " ".join(words[:index]), " ".join(words[index:])
    return " ".join(words[:-1]), words[-1]


def clean_dutch_full_name(full_name: str) -> str:
    """Reduce an indexed name entry to the single person it starts with.

    "de erfgenamen van + Nicolaas Hendrik van der Wal, wedr. van Cornelia Weydom"
    becomes "Nicolaas Hendrik van der Wal".
    """
    name = full_name.strip()
    for prefix in NAME_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):].strip() or name
    for separator in NAME_SEPARATORS:
        index = name.find(separator)
        if index != -1:
            name = name[:index].strip() or name
    for ending in NAME_ENDINGS:
        if name.endswith(ending):
            name = name[: -len(ending)].strip() or name
    return name


def clean_age(age: str | None) -> str:
    """Translate "23 jaar" to "23" and "10 dagen" to "10 days"."""
    if not age:
        return ""
    age = age.strip().replace("dagen", "days").replace("jaar", "years")
    if age.endswith(" years"):
        age = age[: -len(" years")].strip()
    return age


def clean_collection_name(collection: str) -> str:
    prefix = "Archiefnaam: "
    if collection.startswith(prefix):
        collection = collection[len(prefix):]
    match = _COLLECTION_REMAINDER_RE.search(collection)
    if match:
        collection = collection[: match.start()]
    return collection


def _field_by_data_key(fields: PersonFields | None, last_part_of_data_key: str) -> str:
    data_key = "SourceDetail." + last_part_of_data_key
    for item in fields or ():
        if item.get("dataKey") == data_key:
            return item.get("value") or ""
    return ""


class WiewaswieReader(ExtractedDataReader):
    """WieWasWie source detail pages.

    The extracted data has ``people`` (one list of label/value/dataKey fields
    per person), an ``eventList`` and a ``sourceList``. Labels depend on the
    page language, which is taken from the URL.
    """

    site_name = "wiewaswie"

    def __init__(self, ed: Mapping[str, Any]) -> None:
        super().__init__(ed)
        self.people: list[PersonFields] = list(ed.get("people") or [])
        self.document_type = self.source_field("DocumentType")
        self.event_type = self.event_field("Event")
        self.type_info = DOCUMENT_TYPES.get(self.document_type) if self.document_type else None

        if self.type_info:
            record_type = self.type_info.record_type
            if record_type is None and self.event_type:
                record_type = self.type_info.record_type_from_event.get(self.event_type)
            self.record_type = record_type or RecordType.UNCLASSIFIED
            self.record_subtype = self.type_info.record_subtype

        self.lang = ""
        url = ed.get("url") or ""
        if url.startswith(URL_PREFIX):
            remainder = url[len(URL_PREFIX):]
            if remainder.startswith("en"):
                self.lang = "en"
            elif remainder.startswith("nl"):
                self.lang = "nl"

    # Field lookup

    def source_field(self, last_part_of_data_key: str) -> str:
        return _field_by_data_key(self.ed.get("sourceList"), last_part_of_data_key)

    def event_field(self, last_part_of_data_key: str) -> str:
        return _field_by_data_key(self.ed.get("eventList"), last_part_of_data_key)

    def _labels(self, field_type: str) -> tuple[str, ...]:
        if not self.type_info:
            return ()
        return self.type_info.labels.get(self.lang, {}).get(field_type, ())

    def person_field(self, person: PersonFields, field_type: str) -> str:
        labels = self._labels(field_type)
        for item in person:
            if item.get("label") in labels:
                return item.get("value") or ""
        return ""

    def _primary_field(self, field_type: str) -> str:
        return self.person_field(self.people[0], field_type) if self.people else ""

    def _primary_field_by_data_key(self, last_part_of_data_key: str) -> str:
        return _field_by_data_key(self.people[0], last_part_of_data_key) if self.people else ""

    def find_person_by_first_field_type(self, field_type: str) -> PersonFields | None:
        labels = self._labels(field_type)
        for person in self.people:
            if person and person[0].get("label") in labels:
                return person
        return None

    def _named_person(self, field_type: str) -> str:
        person = self.find_person_by_first_field_type(field_type)
        return self.person_field(person, field_type) if person else ""

    def make_name_obj_from_full_name(self, full_name: str | None) -> NameObj | None:
        if not full_name or not full_name.strip():
            return None
        name = collapse_whitespace(clean_dutch_full_name(full_name))
        forenames, last_name = separate_full_name_into_parts(name)
        if forenames:
            return NameObj(name=name, forenames=forenames, last_name=last_name)
        return NameObj(name=name)

    # Accessors

    def has_valid_data(self) -> bool:
        return bool(self.ed.get("success")) and bool(self.document_type) and bool(self.lang) and bool(self.type_info)

    def get_source_type(self) -> SourceType:
        return SourceType.RECORD

    def get_name_obj(self) -> NameObj | None:
        name_obj = None
        name_format = self.type_info.name_format if self.type_info else ""
        if name_format == "full":
            name_obj = self.make_name_obj_from_full_name(self._primary_field(FULL_NAME))
        elif name_format == "forenamesOnly":
            name_obj = self.make_name_obj_from_forenames(self._primary_field(FORENAMES))

        if name_obj is None:
            # Fall back to the page title, e.g. "BS Geboorte met Jan de Vries"
            title = self.ed.get("title") or ""
            prefix = f"{self.document_type} met "
            if self.document_type and title.startswith(prefix):
                name_obj = self.make_name_obj_from_full_name(title[len(prefix):])
        return name_obj

    def get_gender(self) -> str:
        if self.type_info and self.type_info.fixed_gender:
            return self.type_info.fixed_gender
        gender = self._primary_field(GENDER)
        if gender == "Man":
            return "male"
        if gender == "Vrouw":
            return "female"
        return ""

    def get_event_date_obj(self) -> DateObj | None:
        date = self.event_field("EventDate") or self.source_field("RegistrationDate")
        return self.make_date_obj_from_ddmmyyyy(date, "-")

    def get_event_place_obj(self) -> PlaceObj | None:
        event_place = self.event_field("EventPlace")
        document_place = self.source_field("DocumentPlace")
        region = self.source_field("CollectionRegion")

        place = ""
        if event_place:
            place = event_place
            if document_place and document_place != event_place:
                place += ", " + document_place
        elif document_place:
            place = document_place

        if region and not place.endswith(region):
            place = f"{place}, {region}" if place else region

        place = f"{place}, Nederland" if place else "Nederland"
        return self.make_place_obj_from_full_place_name(place)

    def get_birth_date_obj(self) -> DateObj | None:
        return self.make_date_obj_from_ddmmyyyy(self._primary_field_by_data_key("BirthDate"), "-")

    def get_birth_place_obj(self) -> PlaceObj | None:
        return self.make_place_obj_from_full_place_name(self._primary_field_by_data_key("BirthPlace"))

    def get_death_date_obj(self) -> DateObj | None:
        date = self._primary_field_by_data_key("DeathDate")
        if not date and self.document_type == "BS Overlijden":
            date = self.event_field("EventDate")
        return self.make_date_obj_from_ddmmyyyy(date, "-")

    def get_death_place_obj(self) -> PlaceObj | None:
        return self.make_place_obj_from_full_place_name(self._primary_field_by_data_key("DeathPlace"))

    def get_age_at_event(self) -> str:
        return clean_age(self._primary_field(AGE))

    def get_occupation(self) -> str:
        return self._primary_field_by_data_key("Profession")

    def get_spouse_obj(self) -> Spouse | None:
        bride = self.find_person_by_first_field_type(PERSON_BRIDE)
        if bride:
            name_obj = self.make_name_obj_from_full_name(self.person_field(bride, PERSON_BRIDE))
            if not name_obj:
                return None
            parents = self.make_parents_from_full_names(
                self._named_person(PERSON_BRIDE_FATHER),
                self._named_person(PERSON_BRIDE_MOTHER),
            )
            return Spouse(
                name=name_obj,
                marriage_date=self.get_event_date_obj(),
                marriage_place=self.get_event_place_obj(),
                age=clean_age(self.person_field(bride, AGE)),
                person_gender="female",
                parents=parents,
            )

        # Deaths, burials and some other records can name a spouse
        spouse_name = self._named_person(PERSON_SPOUSE)
        if spouse_name:
            return self.make_spouse_obj(self.make_name_obj_from_full_name(spouse_name))
        return None

    def get_parents(self) -> Parents | None:
        return self.make_parents_from_full_names(
            self._named_person(PERSON_FATHER),
            self._named_person(PERSON_MOTHER),
        )

    def get_household(self) -> Household | None:
        if self.document_type != "Bevolkingsregister" or len(self.people) <= 1:
            return None

        field_names = ["name"]
        members = []
        for person in self.people:
            name = self.person_field(person, FULL_NAME)
            if not name:
                continue
            values = {"name": name}
            for data_key, field_name in (
                ("Profession", "profession"),
                ("BirthDate", "birthDate"),
                ("BirthPlace", "birthPlace"),
            ):
                value = _field_by_data_key(person, data_key)
                if not value:
                    continue
                if field_name == "birthDate":
                    date_obj = self.make_date_obj_from_ddmmyyyy(value, "-")
                    if date_obj:
                        value = date_obj.get_date_string()
                values[field_name] = value
                if field_name not in field_names:
                    field_names.append(field_name)
            members.append(HouseholdMember(values=values, is_selected=person is self.people[0]))

        return Household(field_names=tuple(field_names), members=tuple(members))

    # Citation fragments

    def get_source_title(self) -> str:
        title = self.document_type
        if self.type_info and self.type_info.en_document_type:
            title += f" ({self.type_info.en_document_type})"
        return title

    def get_source_reference(self) -> str:
        institution = self.source_field("HeritageInstitutionName")
        collection = self.source_field("Collection")
        if collection:
            collection = clean_collection_name(collection)
        if not institution or not collection:
            return ""

        reference = f"{institution}, Collection: {collection}"
        registration_number = self.source_field("RegistrationNumber")
        if registration_number:
            reference += f", Registration number: {registration_number}"
        book = self.source_field("Book")
        if book:
            reference += f", Book: {book}"
        return reference

    def get_external_link(self) -> tuple[str, str] | None:
        """Return (link, text) for the original archive's page, if the record has one."""
        link = self.ed.get("originalSourceLink")
        if not link:
            return None
        institution = self.source_field("HeritageInstitutionName")
        text = f"{institution} Record" if institution else "External Record"
        return link, text
