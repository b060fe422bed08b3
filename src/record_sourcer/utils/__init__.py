"""Utility functions for record-sourcer."""

from record_sourcer.utils.date_utils import (
    ParsedDate,
    compare_date_strings,
    convert_ddmmyyyy_to_date_string,
    get_quarter_from_month_name,
    parse_date,
    quarter_name,
)
from record_sourcer.utils.name_utils import (
    convert_english_given_name_from_abbreviation_to_full,
    convert_english_given_name_from_full_to_abbreviation,
    convert_name_from_all_caps_to_mixed_case,
)
from record_sourcer.utils.place_utils import normalize_place_string

__all__ = [
    "ParsedDate",
    "compare_date_strings",
    "convert_ddmmyyyy_to_date_string",
    "convert_english_given_name_from_abbreviation_to_full",
    "convert_english_given_name_from_full_to_abbreviation",
    "convert_name_from_all_caps_to_mixed_case",
    "get_quarter_from_month_name",
    "normalize_place_string",
    "parse_date",
    "quarter_name",
]
