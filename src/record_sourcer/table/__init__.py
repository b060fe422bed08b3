"""Household table rendering."""

from record_sourcer.table.household import build_household_table, does_citation_want_household_table

__all__ = ["build_household_table", "does_citation_want_household_table"]
