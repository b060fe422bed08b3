"""Person name value object."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from record_sourcer.utils.name_utils import collapse_whitespace, split_full_name


def _join_parts(data: dict[str, Any]) -> str:
    parts = [data.get(key) or "" for key in ("prefix", "forenames", "last_name", "suffix")]
    return collapse_whitespace(" ".join(parts))


class NameObj(BaseModel):
    """A person's name as found in a record.

    The full name is authoritative. When only the parts are given the full
    name is built from them; when both are given they must agree.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Full name as it should be displayed")
    forenames: str = Field(default="", description="Given names, space separated")
    last_name: str = Field(default="", description="Surname, including any tussenvoegsel")
    prefix: str = Field(default="", description="Title such as 'Rev' or 'Mrs'")
    suffix: str = Field(default="", description="Suffix such as 'Jr'")

    @model_validator(mode="before")
    @classmethod
    def _fill_full_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            joined = _join_parts(data)
            if joined:
                data = {**data, "name": joined}
        return data

    @model_validator(mode="after")
    def _check_parts(self) -> NameObj:
        if self.forenames or self.last_name:
            joined = _join_parts(self.model_dump())
            if joined.lower() != collapse_whitespace(self.name).lower():
                raise ValueError(f"name parts {joined!r} do not match full name {self.name!r}")
        return self

    def infer_full_name(self) -> str:
        return self.name

    def infer_forenames(self) -> str:
        if self.forenames:
            return self.forenames
        forenames, _ = split_full_name(self.name)
        return forenames

    def infer_first_name(self) -> str:
        forenames = self.infer_forenames()
        return forenames.split(" ")[0] if forenames else ""

    def infer_last_name(self) -> str:
        if self.last_name:
            return self.last_name
        _, last_name = split_full_name(self.name)
        return last_name


def make_name_obj_from_full_name(full_name: str | None) -> NameObj | None:
    if not full_name or not full_name.strip():
        return None
    return NameObj(name=collapse_whitespace(full_name))


def make_name_obj_from_forenames_and_last_name(
    forenames: str | None, last_name: str | None
) -> NameObj | None:
    forenames = collapse_whitespace(forenames or "")
    last_name = collapse_whitespace(last_name or "")
    if not forenames and not last_name:
        return None
    return NameObj(forenames=forenames, last_name=last_name)


def make_name_obj_from_forenames(forenames: str | None) -> NameObj | None:
    forenames = collapse_whitespace(forenames or "")
    if not forenames:
        return None
    return NameObj(name=forenames, forenames=forenames)
