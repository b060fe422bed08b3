"""Standard one-line summary of a record for the citation body.

Examples:
    John Smith birth registration in the Jan-Feb-Mar quarter of 1881 in Kensington district
    Jan Jansen marriage to Maria de Vries on 3 May 1890 in Amsterdam, Noord-Holland, Nederland
"""

from __future__ import annotations

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.models.record_type import RecordType
from record_sourcer.utils.date_utils import parse_date, quarter_name

# Event wording used after the person's name
EVENT_PHRASES: dict[RecordType, str] = {
    RecordType.BIRTH: "birth",
    RecordType.BIRTH_REGISTRATION: "birth registration",
    RecordType.BAPTISM: "baptism",
    RecordType.BIRTH_OR_BAPTISM: "birth or baptism",
    RecordType.DEATH: "death",
    RecordType.DEATH_REGISTRATION: "death registration",
    RecordType.BURIAL: "burial",
    RecordType.CREMATION: "cremation",
    RecordType.MARRIAGE: "marriage",
    RecordType.MARRIAGE_REGISTRATION: "marriage registration",
    RecordType.DIVORCE: "divorce",
    RecordType.PROBATE: "probate",
    RecordType.WILL: "will",
    RecordType.IMMIGRATION: "immigration",
    RecordType.EMIGRATION: "emigration",
    RecordType.OBITUARY: "obituary",
}

SPOUSE_TYPES = {RecordType.MARRIAGE, RecordType.MARRIAGE_REGISTRATION, RecordType.DIVORCE}


def date_phrase(date_obj: DateObj | None) -> str:
    """Render a date with its preposition.

    "in the Jan-Feb-Mar quarter of 1881", "on 9 Jun 1932" or "in 1881".
    """
    if date_obj is None:
        return ""
    if date_obj.quarter is not None:
        return f"in the {quarter_name(date_obj.quarter)} quarter of {date_obj.year_string}"
    date_string = date_obj.get_date_string()
    if date_obj.date_string and parse_date(date_string).precision == "exact":
        return f"on {date_string}"
    return f"in {date_string}"


def place_phrase(gd: GeneralizedData) -> str:
    if gd.registration_district:
        return f"in {gd.registration_district} district"
    place = gd.infer_event_place()
    return f"in {place}" if place else ""


def _age_phrase(gd: GeneralizedData) -> str:
    age = gd.age_at_event
    if not age and gd.record_type in (RecordType.DEATH, RecordType.DEATH_REGISTRATION, RecordType.BURIAL):
        age = gd.age_at_death
    return f"(age {age})" if age else ""


def spouse_name(gd: GeneralizedData) -> str:
    for spouse in gd.spouses:
        if spouse.name:
            return spouse.name.infer_full_name()
    return ""


def _join(parts: list[str]) -> str:
    return " ".join(part for part in parts if part)


def build_data_string(gd: GeneralizedData) -> str:
    """Summarize ``gd`` as a phrase with no trailing period.

    Returns an empty string when neither a name nor an event is known.
    """
    name = gd.infer_full_name()
    record_type = gd.record_type
    event_date = gd.infer_event_date_obj()

    if record_type == RecordType.CENSUS:
        year = gd.infer_event_year()
        census = f"in the {year} census" if year else "in a census"
        place = gd.infer_event_place()
        parts = [name, _age_phrase(gd)]
        if gd.relationship_to_head and gd.relationship_to_head != "head":
            parts.append(f"({gd.relationship_to_head} of head)")
        parts.append(census)
        if place:
            parts.append(f"in {place}")
        return _join(parts)

    if record_type == RecordType.POPULATION_REGISTER:
        return _join([name, "in a population register", date_phrase(event_date), place_phrase(gd)])

    event = EVENT_PHRASES.get(record_type)
    if event is None:
        if not name and event_date is None:
            return ""
        title = gd.get_ref_title().lower() if record_type != RecordType.UNCLASSIFIED else ""
        record = f"in a {title} record" if title else "in a record"
        return _join([name, record, date_phrase(event_date), place_phrase(gd)])

    parts = [name, event]
    if record_type in SPOUSE_TYPES:
        spouse = spouse_name(gd)
        if spouse:
            parts.append(f"to {spouse}")
    parts.extend([date_phrase(event_date), place_phrase(gd)])
    if record_type in (RecordType.DEATH, RecordType.DEATH_REGISTRATION, RecordType.BURIAL):
        parts.append(_age_phrase(gd))
    data_string = _join(parts)

    if record_type == RecordType.BIRTH_REGISTRATION and gd.mothers_maiden_name:
        data_string += f", mother's maiden name {gd.mothers_maiden_name}"
    return data_string
