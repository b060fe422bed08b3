"""Date value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from record_sourcer.utils.date_utils import (
    convert_ddmmyyyy_to_date_string,
    parse_date,
    quarter_name,
)


class DateObj(BaseModel):
    """A record date.

    Exactly one shape is allowed: a free-form ``date_string``, a
    ``year_string`` with a registration ``quarter``, or a bare
    ``year_string``.
    """

    model_config = ConfigDict(frozen=True)

    date_string: str = Field(default="", description="Date as written, e.g. '9 Jun 1932'")
    year_string: str = Field(default="", description="Four digit year")
    quarter: int | None = Field(default=None, ge=1, le=4, description="Registration quarter 1-4")

    @model_validator(mode="after")
    def _check_shape(self) -> DateObj:
        if self.date_string and (self.year_string or self.quarter is not None):
            raise ValueError("date_string cannot be combined with year_string or quarter")
        if self.quarter is not None and not self.year_string:
            raise ValueError("quarter requires year_string")
        if not self.date_string and not self.year_string:
            raise ValueError("a date needs a date_string or a year_string")
        return self

    def get_date_string(self) -> str:
        if self.date_string:
            return self.date_string
        if self.quarter is not None:
            return f"{quarter_name(self.quarter)} {self.year_string}"
        return self.year_string

    def get_year(self) -> int | None:
        if self.year_string:
            try:
                return int(self.year_string)
            except ValueError:
                return parse_date(self.year_string).year
        return parse_date(self.date_string).year


def make_date_obj_from_date_string(date_string: str | None) -> DateObj | None:
    if not date_string or not date_string.strip():
        return None
    return DateObj(date_string=date_string.strip())


def make_date_obj_from_year(year: str | int | None) -> DateObj | None:
    if year is None or not str(year).strip():
        return None
    return DateObj(year_string=str(year).strip())


def make_date_obj_from_year_and_quarter(year: str | int | None, quarter: int | None) -> DateObj | None:
    if year is None or not str(year).strip():
        return None
    return DateObj(year_string=str(year).strip(), quarter=quarter)


def make_date_obj_from_ddmmyyyy(text: str | None, separator: str) -> DateObj | None:
    if not text:
        return None
    return make_date_obj_from_date_string(convert_ddmmyyyy_to_date_string(text, separator))
