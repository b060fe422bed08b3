"""Relationship-to-head normalization for census households."""

from __future__ import annotations

RELATIONSHIP_SYNONYMS = {
    "head": ("head", "head of household", "hd"),
    "wife": ("wife", "wf"),
    "husband": ("husband", "hus", "husb"),
    "son": ("son", "s"),
    "daughter": ("daughter", "dau", "dau.", "dr", "d"),
    "stepson": ("stepson", "step son", "step-son"),
    "stepdaughter": ("stepdaughter", "step daughter", "step-daughter", "step dau"),
    "grandson": ("grandson", "grand son", "gson"),
    "granddaughter": ("granddaughter", "grand daughter", "gdau"),
    "father": ("father",),
    "mother": ("mother",),
    "father-in-law": ("father-in-law", "father in law"),
    "mother-in-law": ("mother-in-law", "mother in law"),
    "son-in-law": ("son-in-law", "son in law"),
    "daughter-in-law": ("daughter-in-law", "daughter in law", "dau in law"),
    "brother": ("brother", "bro"),
    "sister": ("sister", "sis"),
    "brother-in-law": ("brother-in-law", "brother in law"),
    "sister-in-law": ("sister-in-law", "sister in law"),
    "nephew": ("nephew",),
    "niece": ("niece",),
    "cousin": ("cousin",),
    "servant": ("servant", "serv", "servt", "domestic servant"),
    "boarder": ("boarder",),
    "lodger": ("lodger",),
    "visitor": ("visitor",),
}

_LOOKUP = {
    synonym: standard
    for standard, synonyms in RELATIONSHIP_SYNONYMS.items()
    for synonym in synonyms
}


def standardize_relationship_to_head(relationship: str | None) -> str:
    """Map a site's relationship wording ("Dau", "Head of household") to a standard term.

    Unrecognized values come back lowercased and trimmed.
    """
    if not relationship:
        return ""
    text = " ".join(relationship.split()).lower()
    return _LOOKUP.get(text, text)
