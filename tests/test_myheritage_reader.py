"""Tests for the MyHeritage reader."""

import pytest

from record_sourcer.citation.data_string import build_data_string
from record_sourcer.exceptions import InvalidExtractedDataError
from record_sourcer.generalize import generalize_extracted_data
from record_sourcer.models import RecordType, SourceType
from record_sourcer.readers.myheritage import clean_mh_date, clean_mh_relationship


@pytest.fixture
def marriage_ed():
    return {
        "success": True,
        "pageType": "record",
        "url": "https://www.myheritage.com/research/collection-1/england-marriages?itemId=2",
        "collectionTitle": "England Marriages, 1538-1973",
        "recordData": {
            "Name": {"value": "John Smith & Mary Jones"},
            "Marriage": {"dateString": "Jun 3 1890", "placeString": "Leeds, Yorkshire, England"},
            "Spouse": {"value": "Mary Jones"},
            "Father": {"value": "William Smith"},
        },
    }


class TestMyHeritageCensus:
    """Tests for a census record with a household."""

    def test_generalize_census(self, myheritage_census_ed):
        gd = generalize_extracted_data("myheritage", myheritage_census_ed)

        assert gd.record_type == RecordType.CENSUS
        assert gd.source_type == SourceType.RECORD
        assert gd.infer_full_name() == "John Smith"
        assert gd.person_gender == "male"
        assert gd.infer_event_year() == 1881
        assert gd.infer_event_place() == "Kensington, London, England"
        assert gd.occupation == "Carpenter"
        assert gd.relationship_to_head == "head"

    def test_household(self, myheritage_census_ed):
        gd = generalize_extracted_data("myheritage", myheritage_census_ed)

        assert gd.household.field_names == ("name", "relationship", "age")
        assert [m.get("relationship") for m in gd.household.members] == ["head", "wife", "son"]
        assert gd.household.get_selected_member().get("name") == "John Smith"

    def test_spouse_inferred_from_household(self, myheritage_census_ed):
        """Test that the head's wife becomes the head's spouse."""
        gd = generalize_extracted_data("myheritage", myheritage_census_ed)

        assert len(gd.spouses) == 1
        assert gd.spouses[0].name.name == "Mary Smith"
        assert gd.spouses[0].person_gender == "female"
        assert gd.spouses[0].age == "38"
        assert gd.parents is None

    def test_parents_inferred_for_son(self, myheritage_census_ed):
        members = myheritage_census_ed["household"]["members"]
        members[0]["isSelected"] = False
        members[2]["isSelected"] = True
        myheritage_census_ed["recordData"]["Name"] = {"value": "William Smith"}

        gd = generalize_extracted_data("myheritage", myheritage_census_ed)
        assert gd.relationship_to_head == "son"
        assert gd.parents.father.name.name == "John Smith"
        assert gd.parents.mother.name.name == "Mary Smith"
        assert gd.spouses == ()

    def test_closed_member(self, myheritage_census_ed):
        myheritage_census_ed["household"]["members"].append({"isClosed": True})
        gd = generalize_extracted_data("myheritage", myheritage_census_ed)
        assert gd.household.members[-1].is_closed

    def test_data_string(self, myheritage_census_ed):
        gd = generalize_extracted_data("myheritage", myheritage_census_ed)
        assert build_data_string(gd) == "John Smith in the 1881 census in Kensington, London, England"


class TestMyHeritageMarriage:
    """Tests for a marriage record."""

    def test_generalize_marriage(self, marriage_ed):
        gd = generalize_extracted_data("myheritage", marriage_ed)

        assert gd.record_type == RecordType.MARRIAGE
        assert gd.infer_full_name() == "John Smith"
        assert gd.event_date.date_string == "3 Jun 1890"
        assert gd.spouses[0].name.name == "Mary Jones"
        assert gd.spouses[0].marriage_place.place_string == "Leeds, Yorkshire, England"
        assert gd.parents.father.name.name == "William Smith"
        assert gd.parents.mother is None

    def test_spouse_from_bride_and_groom(self, marriage_ed):
        del marriage_ed["recordData"]["Spouse"]
        marriage_ed["recordData"]["Groom"] = {"value": "John Smith"}
        marriage_ed["recordData"]["Bride"] = {"value": "Mary Jones"}

        gd = generalize_extracted_data("myheritage", marriage_ed)
        assert gd.spouses[0].name.name == "Mary Jones"


class TestMyHeritagePages:
    def test_profile_page(self):
        ed = {
            "success": True,
            "pageType": "person",
            "recordData": {"Birth": {"dateString": "1850", "placeString": "Leeds, England"}},
            "recordTitle": "John Smith",
        }
        gd = generalize_extracted_data("myheritage", ed)
        assert gd.source_type == SourceType.PROFILE
        assert gd.record_type == RecordType.UNCLASSIFIED
        assert gd.infer_full_name() == "John Smith"
        assert gd.birth_date.date_string == "1850"

    def test_no_record_data_rejected(self):
        with pytest.raises(InvalidExtractedDataError):
            generalize_extracted_data("myheritage", {"success": True, "pageType": "record"})


class TestMyHeritageCleanup:
    """Tests for MyHeritage date and relationship cleanup."""

    @pytest.mark.parametrize(
        "date_string,expected",
        [
            ("1881", "1881"),
            ("Jan-Feb-Mar 1881", "Jan-Feb-Mar 1881"),
            ("July-Aug-Sep 1914", "Jul-Aug-Sep 1914"),
            ("Aug 22 1822", "22 Aug 1822"),
            ("Between 1880 and 1890", ""),
            ("about 1850", "about 1850"),
            (None, ""),
        ],
    )
    def test_clean_mh_date(self, date_string, expected):
        assert clean_mh_date(date_string) == expected

    def test_clean_relationship(self):
        assert clean_mh_relationship("Wife (implied)") == "Wife"
        assert clean_mh_relationship("Son") == "Son"
