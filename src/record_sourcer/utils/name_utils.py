"""Name normalization utilities.

Converts all-caps names found in transcribed indexes to mixed case and maps
historical English given-name abbreviations to and from their full forms.
"""

from __future__ import annotations

import re

# "MACKENZIE" stays "Mackenzie" rather than "MacKenzie"
MAC_EXCEPTIONS = {"Macilbowie", "Mackenzie", "Macmaster", "Mackey", "Mackie", "Machin"}
MC_EXCEPTIONS = {"Mcilbowie", "Mckenzie", "Mcmaster"}

# (abbreviation, full name); first match wins in both directions
ENGLISH_GIVEN_NAME_ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    ("Abig", "Abigail"),
    ("Abm", "Abraham"),
    ("Abr", "Abraham"),
    ("Agn", "Agnes"),
    ("Alex", "Alexander"),
    ("Alexr", "Alexander"),
    ("Alf", "Alfred"),
    ("Amb", "Ambrose"),
    ("And", "Andrew"),
    ("Ant", "Anthony"),
    ("Art", "Arthur"),
    ("Aug", "Augustus"),
    ("Barb", "Barbara"),
    ("Bart", "Bartholomew"),
    ("Benj", "Benjamin"),
    ("Benjm", "Benjamin"),
    ("Brid", "Bridget"),
    ("Cath", "Catherine"),
    ("Chas", "Charles"),
    ("Chr", "Christian"),
    ("Clem", "Clement"),
    ("Const", "Constance"),
    ("Corn", "Cornelius"),
    ("Danl", "Daniel"),
    ("Dav", "David"),
    ("Deb", "Deborah"),
    ("Den", "Dennis"),
    ("Doug", "Douglas"),
    ("Dy", "Dorothy"),
    ("Edm", "Edmund"),
    ("Edr", "Edward"),
    ("Edw", "Edward"),
    ("Eliz", "Elizabeth"),
    ("Elizth", "Elizabeth"),
    ("Elnr", "Eleanor"),
    ("Esth", "Esther"),
    ("Ezek", "Ezekiel"),
    ("Froo", "Franco"),
    ("Fs", "Francis"),
    ("Gab", "Gabriel"),
    ("Geo", "George"),
    ("Geof", "Geoffrey"),
    ("Godf", "Godfrey"),
    ("Greg", "Gregory"),
    ("Gul", "William"),
    ("Han", "Hannah"),
    ("Hen", "Henry"),
    ("Hel", "Helen"),
    ("Herb", "Herbert"),
    ("Hy", "Henry"),
    ("Ioh", "John"),
    ("Is", "Isaac"),
    ("Isb", "Isabel"),
    ("Jac", "James"),
    ("Jas", "James"),
    ("Jer", "Jeremiah"),
    ("Jno", "John"),
    ("Jon", "Jonathan"),
    ("Jos", "Joseph"),
    ("Josh", "Joshua"),
    ("Josh", "Josiah"),
    ("Jud", "Judith"),
    ("Lau", "Laurence"),
    ("Lawr", "Lawrence"),
    ("Leon", "Leonard"),
    ("Lyd", "Lydia"),
    ("Margt", "Margaret"),
    ("Math", "Matthias"),
    ("Matt", "Matthew"),
    ("Mau", "Maurice"),
    ("Mich", "Michael"),
    ("Micls", "Michael"),
    ("Mix", "Michael"),
    ("Mill", "Millicent"),
    ("My", "Mary"),
    ("Nath", "Nathaniel"),
    ("Nich", "Nicholas"),
    ("Nics", "Nicholas"),
    ("Ol", "Oliver"),
    ("Pat", "Patrick"),
    ("Pen", "Penelope"),
    ("Pet", "Peter"),
    ("Phil", "Philip"),
    ("Phin", "Phineas"),
    ("Phyl", "Phyllis"),
    ("Prisc", "Priscilla"),
    ("Pru", "Prudence"),
    ("Rach", "Rachel"),
    ("Ray", "Raymond"),
    ("Reb", "Rebecca"),
    ("Reg", "Reginald"),
    ("Ric", "Richard"),
    ("Richd", "Richard"),
    ("Robt", "Robert"),
    ("Rog", "Roger"),
    ("Saml", "Samuel"),
    ("Sar", "Sarah"),
    ("Silv", "Sylvester"),
    ("Sim", "Simon"),
    ("Sol", "Solomon"),
    ("Ste", "Stephen"),
    ("Susna", "Susanna"),
    ("Theo", "Theodore"),
    ("Thos", "Thomas"),
    ("Tim", "Timothy"),
    ("Urs", "Ursula"),
    ("Val", "Valentine"),
    ("Vinc", "Vincent"),
    ("Walt", "Walter"),
    ("Win", "Winifred"),
    ("Wm", "William"),
    ("Xpr", "Christopher"),
    ("Xtian", "Christian"),
    ("Xtopher", "Christopher"),
    ("Zach", "Zachariah"),
)


def collapse_whitespace(text: str) -> str:
    """Trim and collapse runs of whitespace to single spaces."""
    return " ".join(text.split())


def _is_effectively_all_caps(text: str) -> bool:
    for word in text.split(" "):
        if any(c.isalpha() for c in word) and word != word.upper():
            return False
    return True


def _upper_at(word: str, index: int) -> str:
    if index < 0 or index >= len(word):
        return word
    return word[:index] + word[index].upper() + word[index + 1 :]


def _capitalize_word(word: str) -> str:
    word = _upper_at(word, 0)
    length = len(word)

    if word.startswith("Mac"):
        if length >= 5 and word not in MAC_EXCEPTIONS:
            word = _upper_at(word, 3)
    elif word.startswith("Mc"):
        if length > 2 and word not in MC_EXCEPTIONS:
            word = _upper_at(word, 2)
    elif word.startswith("O'"):
        if length > 2:
            word = _upper_at(word, 2)
    elif "'" in word:
        quote = word.index("'")
        if length > 2 and quote < length - 1:
            word = _upper_at(word, quote + 1)
    elif "-" in word:
        if length > 2:
            for i, c in enumerate(word[:-1]):
                if c == "-":
                    word = _upper_at(word, i + 1)
    elif "/" in word:
        if length > 2:
            for i, c in enumerate(word[:-1]):
                if c == "/":
                    word = _upper_at(word, i + 1)
    elif word.startswith("("):
        word = _upper_at(word, 1)

    return word


def convert_name_from_all_caps_to_mixed_case(name: str) -> str:
    """Convert an all-caps name such as "JOHN MACGREGOR" to "John MacGregor".

    Names that already contain lowercase letters come back trimmed with
    whitespace collapsed and otherwise untouched.
    """
    if not name:
        return name

    collapsed = collapse_whitespace(name)

    # "(Mrs) FRASER" -> "FRASER"
    text = collapsed
    if text.startswith("("):
        close = text.find(")")
        if close != -1:
            remainder = text[close + 1 :].strip()
            if not remainder:
                return collapsed
            text = remainder

    # Single periods become spaces; an ellipsis is kept
    text = re.sub(r"([^.])\.([^.])", r"\1 \2", text)
    text = re.sub(r"^\.([^.])", r"\1", text)
    text = re.sub(r"([^.])\.$", r"\1", text)
    text = collapse_whitespace(text)

    if not _is_effectively_all_caps(text):
        return collapsed

    if len(text) == 1:
        return text.upper()

    return " ".join(_capitalize_word(word) for word in text.lower().split(" "))


def convert_english_given_name_from_abbreviation_to_full(abbreviation: str) -> str:
    """Return the full given name for an abbreviation, or "" if unknown."""
    if not abbreviation:
        return ""
    for abbrev, full in ENGLISH_GIVEN_NAME_ABBREVIATIONS:
        if abbrev == abbreviation:
            return full
    return ""


def convert_english_given_name_from_full_to_abbreviation(full_name: str) -> str:
    """Return the first abbreviation listed for a full given name, or "" if none."""
    if not full_name:
        return ""
    for abbrev, full in ENGLISH_GIVEN_NAME_ABBREVIATIONS:
        if full == full_name:
            return abbrev
    return ""


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split "John Henry Smith" into ("John Henry", "Smith")."""
    parts = collapse_whitespace(full_name).split(" ")
    if len(parts) < 2:
        return "", parts[0] if parts else ""
    return " ".join(parts[:-1]), parts[-1]
