"""Rule based record type classification.

Sites that do not state a record type directly are classified by walking
a list of rules from the top. The first rule whose filters all pass decides
the type, so more specific rules have to come first.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass, field

from record_sourcer.models.record_type import RecordSubtype, RecordType

PartSets = tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class RecordTypeRule:
    """One classification rule.

    Each ``*_matches``/``required_*`` filter is a list of part sets: a part
    set matches when every part in it is present and the filter passes when
    any part set matches. A filter left as None is not checked.
    """

    record_type: RecordType = RecordType.UNCLASSIFIED
    record_subtype: RecordSubtype | None = None
    document_types: tuple[str, ...] | None = None
    collection_title_matches: PartSets | None = None
    required_record_sections: PartSets | None = None
    required_fields: PartSets | None = None
    record_type_from_event: Mapping[str, RecordType] | None = None


@dataclass(frozen=True)
class ClassificationInput:
    """What a site reports about a record, as seen by the classifier."""

    document_type: str | None = None
    collection_title: str = ""
    record_sections: Collection[str] = field(default_factory=frozenset)
    fields: Collection[str] = field(default_factory=frozenset)
    event: str = ""


def _any_part_set_in_text(part_sets: PartSets, text: str) -> bool:
    return any(all(part in text for part in parts) for parts in part_sets)


def _any_part_set_present(part_sets: PartSets, names: Collection[str]) -> bool:
    return any(all(part in names for part in parts) for parts in part_sets)


def rule_matches(rule: RecordTypeRule, data: ClassificationInput) -> bool:
    if rule.document_types is not None:
        if not data.document_type or data.document_type not in rule.document_types:
            return False
    if rule.collection_title_matches is not None:
        if not _any_part_set_in_text(rule.collection_title_matches, data.collection_title):
            return False
    if rule.required_record_sections is not None:
        if not _any_part_set_present(rule.required_record_sections, data.record_sections):
            return False
    if rule.required_fields is not None:
        if not _any_part_set_present(rule.required_fields, data.fields):
            return False
    return True


def find_matching_rule(
    rules: Sequence[RecordTypeRule], data: ClassificationInput
) -> RecordTypeRule | None:
    for rule in rules:
        if rule_matches(rule, data):
            return rule
    return None


def classify_record_type(
    rules: Sequence[RecordTypeRule], data: ClassificationInput
) -> tuple[RecordType, RecordSubtype | None]:
    """Return the record type and subtype chosen by the first matching rule."""
    rule = find_matching_rule(rules, data)
    if rule is None:
        return RecordType.UNCLASSIFIED, None
    if rule.record_type_from_event is not None:
        event_type = rule.record_type_from_event.get(data.event)
        if event_type is not None:
            return event_type, rule.record_subtype
    return rule.record_type, rule.record_subtype
