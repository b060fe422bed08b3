"""Per-site readers over extracted record data."""

from record_sourcer.readers.base import ExtractedDataReader, RecordReader
from record_sourcer.readers.classifier import (
    ClassificationInput,
    RecordTypeRule,
    classify_record_type,
)
from record_sourcer.readers.registry import READERS, Site, get_reader, resolve_site

__all__ = [
    "READERS",
    "ClassificationInput",
    "ExtractedDataReader",
    "RecordReader",
    "RecordTypeRule",
    "Site",
    "classify_record_type",
    "get_reader",
    "resolve_site",
]
