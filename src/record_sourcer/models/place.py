"""Place value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from record_sourcer.utils.place_utils import normalize_place_string, split_place_string


class PlaceObj(BaseModel):
    """A place as named in a record, with any hierarchy the record separates out."""

    model_config = ConfigDict(frozen=True)

    place_string: str = Field(description="Full place name, comma separated")
    street_address: str = ""
    settlement: str = ""
    county: str = ""
    country: str = ""

    def infer_place_string(self) -> str:
        if self.place_string:
            return self.place_string
        parts = [self.street_address, self.settlement, self.county, self.country]
        return ", ".join(part for part in parts if part)


def make_place_obj_from_full_place_name(place_name: str | None) -> PlaceObj | None:
    """Build a PlaceObj from "Settlement, County, Country".

    With two parts the last is the country; with three or more the one
    before the country is the county and the first is the settlement.
    """
    place_string = normalize_place_string(place_name or "")
    if not place_string:
        return None

    parts = split_place_string(place_string)
    settlement = county = country = ""
    if len(parts) >= 2:
        settlement = parts[0]
        country = parts[-1]
    if len(parts) >= 3:
        county = parts[-2]

    return PlaceObj(
        place_string=place_string,
        settlement=settlement,
        county=county,
        country=country,
    )
