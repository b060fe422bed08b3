"""Date parsing utilities for genealogical record dates.

Record sites render dates in many ways: ISO, GEDCOM ("9 JUN 1932"),
US ("June 9, 1932" or "Aug 22 1822"), quarter-of-year registration
dates ("Jan-Feb-Mar 1881") and bare years. These helpers turn them into
a ParsedDate with precision tracking so records can be ordered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass
class ParsedDate:
    """Structured date with precision tracking."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    quarter: int | None = None
    original: str = ""  # Original string for reference

    @property
    def precision(self) -> str:
        """Return date precision level."""
        if self.day and self.month and self.year:
            return "exact"
        elif self.month and self.year:
            return "month"
        elif self.quarter and self.year:
            return "quarter"
        elif self.year:
            return "year"
        return "unknown"

    def sort_key(self) -> tuple[int, int, int]:
        """Key for chronological ordering; unknown parts sort first."""
        month = self.month or 0
        if not month and self.quarter:
            month = (self.quarter - 1) * 3 + 1
        return (self.year or 0, month, self.day or 0)


# Month name mappings
MONTH_NAMES = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

SHORT_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

LONG_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

QUARTER_NAMES = ("Jan-Feb-Mar", "Apr-May-Jun", "Jul-Aug-Sep", "Oct-Nov-Dec")

# Registration quarters are named by their last month
QUARTER_FROM_MONTH_NAME = {"mar": 1, "jun": 2, "sep": 3, "dec": 4}

_QUARTER_RE = re.compile(r"^([A-Z][a-z]{2})-([A-Z][a-z]{2})-([A-Z][a-z]{2})\s+(\d{4})$")


def quarter_name(quarter: int) -> str:
    """Return "Jan-Feb-Mar" style name for a quarter number 1 to 4."""
    if 1 <= quarter <= 4:
        return QUARTER_NAMES[quarter - 1]
    return ""


def get_quarter_from_month_name(name: str | None) -> int:
    """Map a FreeBMD style quarter name ("Mar", "Jun", "Sep", "Dec") to 1-4.

    Unknown or empty names map to the first quarter.
    """
    if not name:
        return 1
    return QUARTER_FROM_MONTH_NAME.get(name.strip().lower()[:3], 1)


def parse_date(date_str: str) -> ParsedDate:
    """Parse a date string into structured components.

    Handles multiple formats:
    - ISO: 1932-06-09
    - GEDCOM: 9 JUN 1932
    - US: June 9, 1932 or Aug 22 1822
    - Quarter: Jan-Feb-Mar 1881
    - Numeric: 9/6/1932 or 9.6.1932

    Args:
        date_str: Date string in various formats

    Returns:
        ParsedDate with extracted components
    """
    if not date_str:
        return ParsedDate(original=date_str)

    result = ParsedDate(original=date_str)

    quarter_match = _QUARTER_RE.match(date_str.strip())
    if quarter_match:
        name = "-".join(quarter_match.group(i) for i in (1, 2, 3))
        if name in QUARTER_NAMES:
            result.quarter = QUARTER_NAMES.index(name) + 1
            result.year = int(quarter_match.group(4))
            return result

    text = date_str.strip().upper()

    # Try ISO format: YYYY-MM-DD or YYYY-MM or YYYY
    iso_match = re.match(r"^\+?(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$", text)
    if iso_match:
        result.year = int(iso_match.group(1))
        if iso_match.group(2):
            result.month = int(iso_match.group(2))
        if iso_match.group(3):
            result.day = int(iso_match.group(3))
        return result

    # Try GEDCOM format: 9 JUN 1932
    gedcom_match = re.match(r"^(\d{1,2})\s+([A-Z]{3,9})\.?,?\s+(\d{4})$", text)
    if gedcom_match:
        result.day = int(gedcom_match.group(1))
        month_name = gedcom_match.group(2).lower()
        result.month = MONTH_NAMES.get(month_name)
        result.year = int(gedcom_match.group(3))
        return result

    # Try GEDCOM month-year: JUN 1932
    gedcom_my_match = re.match(r"^([A-Z]{3,9})\.?\s+(\d{4})$", text)
    if gedcom_my_match:
        month_name = gedcom_my_match.group(1).lower()
        result.month = MONTH_NAMES.get(month_name)
        result.year = int(gedcom_my_match.group(2))
        return result

    # Try US format with month name: June 9, 1932 or AUG 22 1822
    us_match = re.match(r"^([A-Z]{3,9})\.?\s+(\d{1,2}),?\s+(\d{4})$", text)
    if us_match:
        month_name = us_match.group(1).lower()
        result.month = MONTH_NAMES.get(month_name)
        result.day = int(us_match.group(2))
        result.year = int(us_match.group(3))
        return result

    # Try numeric day-month-year: D/M/YYYY or D-M-YYYY or D.M.YYYY
    numeric_match = re.match(r"^(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})$", text)
    if numeric_match:
        result.day = int(numeric_match.group(1)) or None
        result.month = int(numeric_match.group(2)) or None
        result.year = int(numeric_match.group(3))
        return result

    # Fall back to the last four digit year anywhere in the string
    year_match = re.search(r"(\d{4})(?!.*\d{4})", text)
    if year_match:
        result.year = int(year_match.group(1))
        return result

    return result


def compare_date_strings(a: str, b: str) -> int:
    """Chronological three way comparison of two date strings.

    Returns a negative number when ``a`` is earlier, zero when the parsed
    dates are equal and a positive number when ``a`` is later.
    """
    key_a = parse_date(a).sort_key()
    key_b = parse_date(b).sort_key()
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def convert_ddmmyyyy_to_date_string(text: str, separator: str) -> str:
    """Convert "09-06-1932" (with the given separator) to "9 Jun 1932".

    A zero day or month means that part is unknown and is left out.
    Strings that do not have three numeric parts are returned unchanged.
    """
    parts = text.strip().split(separator)
    if len(parts) != 3 or not all(p.strip().isdigit() for p in parts):
        return text.strip()

    day, month, year = (int(p) for p in parts)
    if not year:
        return ""
    if not month or month > 12:
        return str(year)
    if not day:
        return f"{SHORT_MONTH_NAMES[month - 1]} {year}"
    return f"{day} {SHORT_MONTH_NAMES[month - 1]} {year}"
