"""Narrative sentences synthesized from generalized data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_sourcer.citation.data_string import date_phrase, place_phrase, spouse_name
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.models.record_type import RecordType

PRONOUNS = {"male": "He", "female": "She"}

# Verb phrase for events described as "<name> <verb> <date> <place>."
EVENT_VERBS: dict[RecordType, str] = {
    RecordType.BIRTH: "was born",
    RecordType.BAPTISM: "was baptised",
    RecordType.BIRTH_OR_BAPTISM: "was born or baptised",
    RecordType.DEATH: "died",
    RecordType.BURIAL: "was buried",
    RecordType.CREMATION: "was cremated",
    RecordType.IMMIGRATION: "immigrated",
    RecordType.EMIGRATION: "emigrated",
}

# Noun for events described as "<name>'s <noun> was registered ..."
REGISTERED_EVENTS: dict[RecordType, str] = {
    RecordType.BIRTH_REGISTRATION: "birth",
    RecordType.DEATH_REGISTRATION: "death",
    RecordType.MARRIAGE_REGISTRATION: "marriage",
}


def get_narrative_name(gd: GeneralizedData, options: Mapping[str, Any]) -> str:
    """Subject for the first sentence, per ``narrative_general_nameOrPronoun``."""
    choice = options.get("narrative_general_nameOrPronoun")
    if choice == "pronoun":
        pronoun = PRONOUNS.get(gd.person_gender)
        if pronoun:
            return pronoun
    elif choice == "firstName":
        first_name = gd.infer_first_name()
        if first_name:
            return first_name
    return gd.infer_full_name() or "This person"


def _possessive(name: str) -> str:
    if name == "He":
        return "His"
    if name == "She":
        return "Her"
    return f"{name}'s"


def _sentence(parts: list[str]) -> str:
    return " ".join(part for part in parts if part) + "."


def build_narrative(gd: GeneralizedData, options: Mapping[str, Any]) -> str:
    name = get_narrative_name(gd, options)
    record_type = gd.record_type
    event_date = gd.infer_event_date_obj()
    date_text = date_phrase(event_date)
    place_text = place_phrase(gd)

    if record_type in REGISTERED_EVENTS:
        if event_date is None and not place_text:
            return _generic(name, gd)
        subject = f"{_possessive(name)} {REGISTERED_EVENTS[record_type]}"
        if record_type == RecordType.MARRIAGE_REGISTRATION:
            spouse = spouse_name(gd)
            if spouse:
                subject += f" to {spouse}"
        return _sentence([subject, "was registered", date_text, place_text])

    if record_type in EVENT_VERBS:
        if event_date is None and not place_text:
            return _generic(name, gd)
        sentence = _sentence([name, EVENT_VERBS[record_type], date_text, place_text])
        if record_type == RecordType.BAPTISM and gd.parents:
            parent_names = [
                parent.name.infer_full_name()
                for parent in (gd.parents.father, gd.parents.mother)
                if parent is not None
            ]
            if parent_names:
                sentence = sentence[:-1] + f", child of {' and '.join(parent_names)}."
        return sentence

    if record_type in (RecordType.MARRIAGE, RecordType.DIVORCE):
        verb = "married" if record_type == RecordType.MARRIAGE else "divorced"
        spouse = spouse_name(gd)
        if not spouse and event_date is None:
            return _generic(name, gd)
        return _sentence([name, verb, spouse, date_text, place_text])

    if record_type == RecordType.CENSUS:
        year = gd.infer_event_year()
        place = gd.infer_event_place()
        if not year:
            return _generic(name, gd)
        subject = name.lower() if name in PRONOUNS.values() else name
        sentence = f"In the {year} census {subject}"
        if gd.age_at_event:
            sentence += f" (age {gd.age_at_event})"
        sentence += " was living"
        if place:
            sentence += f" in {place}"
        return sentence + "."

    return _generic(name, gd)


def _generic(name: str, gd: GeneralizedData) -> str:
    year = gd.infer_event_year()
    sentence = f"{name} was in a record"
    if year:
        sentence += f" in {year}"
    return sentence + "."
