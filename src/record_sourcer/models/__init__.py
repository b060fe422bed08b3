"""Data models for record-sourcer."""

from record_sourcer.models.date import DateObj
from record_sourcer.models.generalized import (
    CollectionData,
    GeneralizedData,
    Household,
    HouseholdMember,
    Parent,
    Parents,
    Spouse,
)
from record_sourcer.models.name import NameObj
from record_sourcer.models.place import PlaceObj
from record_sourcer.models.record_type import RecordSubtype, RecordType, SourceType

__all__ = [
    "CollectionData",
    "DateObj",
    "GeneralizedData",
    "Household",
    "HouseholdMember",
    "NameObj",
    "Parent",
    "Parents",
    "PlaceObj",
    "RecordSubtype",
    "RecordType",
    "SourceType",
    "Spouse",
]
