"""Shared extracted data fixtures, one per site."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

RUN_DATE = date(2024, 3, 5)

FS_RECORD_URL = "https://familysearch.org/ark:/61903/1:1:ABCD-123"


@pytest.fixture
def run_date() -> date:
    return RUN_DATE


@pytest.fixture
def freebmd_birth_ed() -> dict[str, Any]:
    return {
        "url": "https://www.freebmd.org.uk/cgi/information.pl?r=12345",
        "eventType": "birth",
        "eventYear": "1881",
        "eventQuarter": "Mar",
        "givenNames": "John",
        "surname": "SMITH",
        "registrationDistrict": "Kensington",
        "referenceVolume": "1a",
        "referencePage": "123",
    }


@pytest.fixture
def wiewaswie_marriage_ed() -> dict[str, Any]:
    return {
        "success": True,
        "url": "https://www.wiewaswie.nl/en/detail/12345678",
        "title": "BS Huwelijk met Jan Jansen",
        "people": [
            [
                {"label": "Groom", "value": "Jan Jansen"},
                {"label": "Age", "value": "25 jaar"},
                {"label": "Occupation", "value": "arbeider", "dataKey": "SourceDetail.Profession"},
            ],
            [{"label": "Father of the groom", "value": "Pieter Jansen"}],
            [{"label": "Mother of the groom", "value": "Maria Bakker"}],
            [
                {"label": "Bride", "value": "Maria de Vries"},
                {"label": "Age", "value": "23 jaar"},
            ],
            [{"label": "Father of the bride", "value": "Hendrik de Vries"}],
            [{"label": "Mother of the bride", "value": "Anna Smit"}],
        ],
        "eventList": [
            {"label": "Event", "value": "Huwelijk", "dataKey": "SourceDetail.Event"},
            {"label": "Date", "value": "03-05-1890", "dataKey": "SourceDetail.EventDate"},
            {"label": "Place", "value": "Amsterdam", "dataKey": "SourceDetail.EventPlace"},
        ],
        "sourceList": [
            {"label": "Document type", "value": "BS Huwelijk", "dataKey": "SourceDetail.DocumentType"},
            {
                "label": "Heritage institution",
                "value": "Noord-Hollands Archief",
                "dataKey": "SourceDetail.HeritageInstitutionName",
            },
            {"label": "Region", "value": "Noord-Holland", "dataKey": "SourceDetail.CollectionRegion"},
            {
                "label": "Collection",
                "value": "Archiefnaam: Burgerlijke Stand, Inventarisnummer: 123",
                "dataKey": "SourceDetail.Collection",
            },
            {"label": "Registration number", "value": "42", "dataKey": "SourceDetail.RegistrationNumber"},
        ],
        "originalSourceLink": "https://www.noord-hollandsarchief.nl/record/42",
    }


@pytest.fixture
def myheritage_census_ed() -> dict[str, Any]:
    return {
        "success": True,
        "pageType": "record",
        "url": "https://www.myheritage.com/research/collection-10152/1881-england-wales-census?itemId=1",
        "collectionTitle": "1881 England & Wales Census",
        "recordSections": {"Census": True},
        "recordData": {
            "Name": {"value": "John Smith"},
            "Gender": {"value": "Male"},
            "Residence": {"dateString": "1881", "placeString": "Kensington, London, England"},
            "Occupation": {"value": "Carpenter"},
        },
        "household": {
            "headings": ["Name", "Relation to head", "Age"],
            "members": [
                {"Name": "John Smith", "Relation to head": "Head", "Age": "40", "isSelected": True},
                {"Name": "Mary Smith", "Relation to head": "Wife", "Age": "38"},
                {"Name": "William Smith", "Relation to head": "Son", "Age": "12"},
            ],
        },
    }


@pytest.fixture
def naie_census_ed() -> dict[str, Any]:
    return {
        "censusYear": "1911",
        "url": "http://www.census.nationalarchives.ie/pages/1911/Dublin/Rathmines/Main_Street/12345/",
        "heading": "Residents of a house 12 in\n  Main Street",
        "imageLink": "/reels/nai000001234/",
        "recordData": {
            "Surname": "Murphy",
            "Forename": "Patrick",
            "Age": "45",
            "Sex": "Male",
            "Relation to head": "Head",
            "Occupation": "Farmer",
            "Marital Status": "Married",
            "Townland/Street": "Main Street",
            "DED": "Rathmines",
            "County": "Dublin",
        },
        "household": {
            "headings": ["Surname", "Forename", "Age", "Sex", "Relation to head"],
            "members": [
                {
                    "Surname": "Murphy",
                    "Forename": "Patrick",
                    "Age": "45",
                    "Sex": "Male",
                    "Relation to head": "Head",
                    "isSelected": True,
                },
                {
                    "Surname": "Murphy",
                    "Forename": "Bridget",
                    "Age": "40",
                    "Sex": "Female",
                    "Relation to head": "Wife",
                },
            ],
        },
    }


@pytest.fixture
def nzbdm_birth_ed() -> dict[str, Any]:
    return {
        "recordType": "birth",
        "recordData": {
            "Registration Number": "1881/12345",
            "Family Name": "SMITH",
            "Given Name(s)": "JOHN HENRY",
            "Mother's Given Name(s)": "MARY",
            "Father's Given Name(s)": "WILLIAM",
        },
    }


@pytest.fixture
def wikipedia_ed() -> dict[str, Any]:
    return {
        "url": "https://en.wikipedia.org/wiki/John_Smith_(explorer)",
        "permalink": "https://en.wikipedia.org/w/index.php?title=John_Smith_(explorer)&oldid=123",
        "title": "John Smith (explorer)",
    }


@pytest.fixture
def fs_record() -> dict[str, Any]:
    """GedcomX document for a christening with both parents named."""
    return {
        "persons": [
            {
                "id": "p1",
                "principal": True,
                "gender": {"type": "http://gedcomx.org/Male"},
                "names": [
                    {
                        "nameForms": [
                            {
                                "fullText": "John Smith",
                                "parts": [
                                    {"type": "http://gedcomx.org/Given", "value": "John"},
                                    {"type": "http://gedcomx.org/Surname", "value": "Smith"},
                                ],
                            }
                        ]
                    }
                ],
                "facts": [
                    {
                        "type": "http://gedcomx.org/Birth",
                        "date": {"original": "9 June 1850"},
                        "place": {"original": "Leeds, Yorkshire, England"},
                    },
                    {
                        "type": "http://gedcomx.org/Christening",
                        "date": {"original": "30 June 1850"},
                        "place": {"original": "Leeds, Yorkshire, England"},
                        "primary": True,
                    },
                ],
            },
            {
                "id": "p2",
                "gender": {"type": "http://gedcomx.org/Male"},
                "names": [{"nameForms": [{"fullText": "William Smith"}]}],
            },
            {
                "id": "p3",
                "gender": {"type": "http://gedcomx.org/Female"},
                "names": [{"nameForms": [{"fullText": "Ann Brown"}]}],
            },
        ],
        "relationships": [
            {
                "type": "http://gedcomx.org/ParentChild",
                "person1": {"resource": "#p2"},
                "person2": {"resource": "#p1"},
            },
            {
                "type": "http://gedcomx.org/ParentChild",
                "person1": {"resource": "#p3"},
                "person2": {"resource": "#p1"},
            },
        ],
        "sourceDescriptions": [
            {
                "id": "sd1",
                "resourceType": "http://gedcomx.org/Collection",
                "titles": [{"value": "England Births and Christenings, 1538-1975"}],
            },
            {
                "id": "sd2",
                "citations": [
                    {
                        "value": '"England Births and Christenings, 1538-1975", database, FamilySearch '
                        f"({FS_RECORD_URL} : 9 June 2022), John Smith, 1850; citing Leeds, "
                        "Yorkshire, England, index based upon data collected by the Genealogical "
                        "Society of Utah."
                    }
                ],
            },
        ],
    }
