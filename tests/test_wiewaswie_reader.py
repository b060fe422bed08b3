"""Tests for the WieWasWie reader and page extractor."""

import pytest

from record_sourcer.citation.data_string import build_data_string
from record_sourcer.exceptions import InvalidExtractedDataError
from record_sourcer.extractors.wiewaswie import extract_data
from record_sourcer.generalize import generalize_extracted_data
from record_sourcer.models import RecordSubtype, RecordType
from record_sourcer.readers.wiewaswie import (
    WiewaswieReader,
    clean_age,
    clean_collection_name,
    clean_dutch_full_name,
    separate_full_name_into_parts,
)

MARRIAGE_PAGE = """
<html><head><title>BS Huwelijk met Jan Jansen</title></head>
<body><div class="sourcedetail-themepage"><div class="row">
<div class="left-column">
  <div class="person"><dl>
    <dt>Groom</dt><dd>Jan Jansen</dd>
    <dt data-dictionary="SourceDetail.Profession">Occupation</dt><dd>arbeider</dd>
  </dl></div>
  <div class="person"><dl><dt>Bride</dt><dd>Maria de Vries</dd></dl></div>
  <div class="gebeurtenis"><dl>
    <dt data-dictionary="SourceDetail.Event">Event</dt><dd>Huwelijk</dd>
    <dt data-dictionary="SourceDetail.EventDate">Date</dt><dd>03-05-1890</dd>
  </dl></div>
</div>
<div class="right-column">
  <dl><dt data-dictionary="SourceDetail.DocumentType">Document type</dt><dd>BS Huwelijk</dd></dl>
  <a href="https://www.noord-hollandsarchief.nl/record/42">View at archive</a>
</div>
</div></div></body></html>
"""


class TestWiewaswieMarriage:
    """Tests for a civil marriage record."""

    def test_generalize_marriage(self, wiewaswie_marriage_ed):
        """Test that the groom is the primary person and the bride the spouse."""
        gd = generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)

        assert gd.record_type == RecordType.MARRIAGE
        assert gd.person_gender == "male"
        assert gd.name.name == "Jan Jansen"
        assert gd.age_at_event == "25"
        assert gd.occupation == "arbeider"
        assert gd.event_date.date_string == "3 May 1890"
        assert gd.infer_event_place() == "Amsterdam, Noord-Holland, Nederland"

    def test_bride_is_spouse(self, wiewaswie_marriage_ed):
        gd = generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)
        spouse = gd.spouses[0]

        assert spouse.person_gender == "female"
        assert spouse.name.forenames == "Maria"
        assert spouse.name.last_name == "de Vries"
        assert spouse.age == "23"
        assert spouse.marriage_date == gd.event_date
        assert spouse.parents.father.name.name == "Hendrik de Vries"
        assert spouse.parents.mother.name.name == "Anna Smit"

    def test_groom_parents(self, wiewaswie_marriage_ed):
        gd = generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)
        assert gd.parents.father.name.name == "Pieter Jansen"
        assert gd.parents.mother.name.name == "Maria Bakker"

    def test_data_string(self, wiewaswie_marriage_ed):
        gd = generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)
        assert build_data_string(gd) == (
            "Jan Jansen marriage to Maria de Vries on 3 May 1890 in Amsterdam, Noord-Holland, Nederland"
        )

    def test_source_fragments(self, wiewaswie_marriage_ed):
        reader = WiewaswieReader(wiewaswie_marriage_ed)
        assert reader.get_source_title() == "BS Huwelijk (Marriage certificates)"
        assert reader.get_source_reference() == (
            "Noord-Hollands Archief, Collection: Burgerlijke Stand, Registration number: 42"
        )
        assert reader.get_external_link() == (
            "https://www.noord-hollandsarchief.nl/record/42",
            "Noord-Hollands Archief Record",
        )

    def test_dutch_page_labels(self, wiewaswie_marriage_ed):
        """Test that a Dutch language page is read through the Dutch labels."""
        wiewaswie_marriage_ed["url"] = "https://www.wiewaswie.nl/nl/detail/12345678"
        wiewaswie_marriage_ed["people"][0][0]["label"] = "Bruidegom"
        wiewaswie_marriage_ed["people"][3][0]["label"] = "Bruid"

        gd = generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)
        assert gd.name.name == "Jan Jansen"
        assert gd.spouses[0].name.name == "Maria de Vries"


class TestWiewaswieOtherDocuments:
    """Tests for other document types."""

    def test_church_membership_subtype(self):
        ed = {
            "success": True,
            "url": "https://www.wiewaswie.nl/en/detail/1",
            "people": [[{"label": "Man:", "value": "Klaas Bakker"}, {"label": "Gender", "value": "Man"}]],
            "sourceList": [{"value": "DTB Overig", "dataKey": "SourceDetail.DocumentType"}],
        }
        gd = generalize_extracted_data("wiewaswie", ed)
        assert gd.record_type == RecordType.OTHER_CHURCH_EVENT
        assert gd.record_subtype == RecordSubtype.MEMBER_REGISTRATION
        assert gd.person_gender == "male"
        assert gd.get_ref_title() == "Church Membership"

    def test_record_type_from_event(self):
        ed = {
            "success": True,
            "url": "https://www.wiewaswie.nl/en/detail/2",
            "people": [[{"label": "Main character", "value": "Anna Visser"}]],
            "eventList": [{"value": "Overlijden", "dataKey": "SourceDetail.Event"}],
            "sourceList": [{"value": "Familieadvertenties", "dataKey": "SourceDetail.DocumentType"}],
        }
        assert generalize_extracted_data("wiewaswie", ed).record_type == RecordType.DEATH

    def test_name_from_page_title(self):
        ed = {
            "success": True,
            "url": "https://www.wiewaswie.nl/en/detail/3",
            "title": "BS Geboorte met Pieter van den Berg",
            "people": [],
            "sourceList": [{"value": "BS Geboorte", "dataKey": "SourceDetail.DocumentType"}],
        }
        gd = generalize_extracted_data("wiewaswie", ed)
        assert gd.name.last_name == "van den Berg"

    def test_population_register_household(self):
        ed = {
            "success": True,
            "url": "https://www.wiewaswie.nl/en/detail/4",
            "people": [
                [
                    {"label": "Registered", "value": "Jan Visser"},
                    {"label": "Birth date", "value": "01-02-1850", "dataKey": "SourceDetail.BirthDate"},
                ],
                [{"label": "Registered", "value": "Grietje Visser"}],
            ],
            "sourceList": [{"value": "Bevolkingsregister", "dataKey": "SourceDetail.DocumentType"}],
        }
        gd = generalize_extracted_data("wiewaswie", ed)
        assert gd.record_type == RecordType.POPULATION_REGISTER
        assert gd.household.field_names == ("name", "birthDate")
        assert gd.household.members[0].is_selected
        assert gd.household.members[0].get("birthDate") == "1 Feb 1850"
        assert gd.household.members[1].get("name") == "Grietje Visser"

    def test_page_not_on_wiewaswie_rejected(self, wiewaswie_marriage_ed):
        wiewaswie_marriage_ed["url"] = "https://example.org/en/detail/1"
        with pytest.raises(InvalidExtractedDataError):
            generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)

    def test_failed_extraction_rejected(self, wiewaswie_marriage_ed):
        wiewaswie_marriage_ed["success"] = False
        with pytest.raises(InvalidExtractedDataError):
            generalize_extracted_data("wiewaswie", wiewaswie_marriage_ed)


class TestDutchNameHelpers:
    """Tests for Dutch name and age cleanup."""

    @pytest.mark.parametrize(
        "full_name,expected",
        [
            ("Jan Hendrik van der Berg", ("Jan Hendrik", "van der Berg")),
            ("Jan Jansen", ("Jan", "Jansen")),
            ("Jansen", ("", "Jansen")),
        ],
    )
    def test_separate_full_name(self, full_name, expected):
        assert separate_full_name_into_parts(full_name) == expected

    def test_clean_full_name(self):
        assert (
            clean_dutch_full_name("de erfgenamen van + Nicolaas Hendrik van der Wal, wedr. van Cornelia Weydom")
            == "Nicolaas Hendrik van der Wal"
        )

    def test_clean_age(self):
        assert clean_age("23 jaar") == "23"
        assert clean_age("10 dagen") == "10 days"
        assert clean_age(None) == ""

    def test_clean_collection_name(self):
        assert clean_collection_name("Archiefnaam: Burgerlijke Stand, Inventarisnummer: 123") == "Burgerlijke Stand"


class TestWiewaswieExtractor:
    """Tests for extracting a saved source detail page."""

    def test_extract_marriage_page(self):
        ed = extract_data(MARRIAGE_PAGE, "https://www.wiewaswie.nl/en/detail/12345678")

        assert ed["success"] is True
        assert ed["title"] == "BS Huwelijk met Jan Jansen"
        assert len(ed["people"]) == 2
        assert ed["people"][0][1] == {
            "label": "Occupation",
            "value": "arbeider",
            "dataKey": "SourceDetail.Profession",
        }
        assert ed["originalSourceLink"] == "https://www.noord-hollandsarchief.nl/record/42"

    def test_extracted_page_generalizes(self):
        ed = extract_data(MARRIAGE_PAGE, "https://www.wiewaswie.nl/en/detail/12345678")
        gd = generalize_extracted_data("wiewaswie", ed)
        assert gd.record_type == RecordType.MARRIAGE
        assert gd.spouses[0].name.name == "Maria de Vries"
        assert gd.event_date.date_string == "3 May 1890"

    def test_unexpected_layout(self):
        ed = extract_data("<html><body><p>Not found</p></body></html>")
        assert ed == {"success": False}
