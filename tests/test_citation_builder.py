"""Tests for citation assembly and option handling."""

from datetime import date

import pytest

from record_sourcer.citation import (
    CitationBuilder,
    CitationInput,
    CitationType,
    build_citation,
)
from record_sourcer.citation.builder import cleanup_citation_text, format_run_date
from record_sourcer.config import Options
from record_sourcer.generalize import generalize_extracted_data

FREEBMD_LINK = "[https://www.freebmd.org.uk/cgi/information.pl?r=12345 FreeBMD Entry Information]"
FREEBMD_DATA = "John Smith birth registration in the Jan-Feb-Mar quarter of 1881 in Kensington district."


@pytest.fixture
def freebmd_input(freebmd_birth_ed, run_date):
    def make(type=CitationType.INLINE, **options):
        gd = generalize_extracted_data("freebmd", freebmd_birth_ed)
        return CitationInput(
            ed=freebmd_birth_ed,
            gd=gd,
            run_date=run_date,
            type=type,
            options=Options(options),
        )

    return make


class TestCitationStyles:
    """Tests for the three citation styles with default options."""

    def test_inline(self, freebmd_input):
        result = build_citation("freebmd", freebmd_input())
        assert result.type == CitationType.INLINE
        assert result.citation == (
            "<ref>\n"
            "'''Birth Registration''':\n"
            '"England & Wales Birth Index", Volume 1a Page 123<br/>\n'
            f"{FREEBMD_LINK} (accessed 5 March 2024)<br/>\n"
            f"{FREEBMD_DATA}\n"
            "</ref>"
        )

    def test_source(self, freebmd_input):
        result = build_citation("freebmd", freebmd_input(CitationType.SOURCE))
        assert result.citation == (
            "* '''Birth Registration''': "
            '"England & Wales Birth Index", Volume 1a Page 123<br/>'
            f"{FREEBMD_LINK} (accessed 5 March 2024)<br/>"
            f"{FREEBMD_DATA}"
        )

    def test_narrative(self, freebmd_input):
        """Test that a narrative citation is the sentence followed by the inline ref."""
        narrative = build_citation("freebmd", freebmd_input(CitationType.NARRATIVE)).citation
        inline = build_citation("freebmd", freebmd_input()).citation

        sentence = (
            "John Smith's birth was registered in the Jan-Feb-Mar quarter of 1881 in Kensington district."
        )
        assert narrative == sentence + inline

    def test_deterministic(self, freebmd_input):
        first = build_citation("freebmd", freebmd_input())
        second = build_citation("freebmd", freebmd_input())
        assert first == second

    def test_input_not_modified(self, freebmd_input, freebmd_birth_ed):
        before = dict(freebmd_birth_ed)
        build_citation("freebmd", freebmd_input(CitationType.NARRATIVE))
        assert freebmd_birth_ed == before


class TestCitationOptions:
    """Tests for the layout options."""

    @pytest.mark.parametrize(
        "date_format,expected",
        [("long", "5 March 2024"), ("short", "5 Mar 2024"), ("iso", "2024-03-05")],
    )
    def test_date_format(self, freebmd_input, date_format, expected):
        citation = build_citation("freebmd", freebmd_input(citation_general_dateFormat=date_format)).citation
        assert f"(accessed {expected})" in citation

    def test_accessed_after_link(self, freebmd_input):
        citation = build_citation("freebmd", freebmd_input(citation_general_addAccessedDate="afterLink")).citation
        assert f"{FREEBMD_LINK}, accessed 5 March 2024" in citation

    def test_no_accessed_date(self, freebmd_input):
        citation = build_citation("freebmd", freebmd_input(citation_general_addAccessedDate="none")).citation
        assert "accessed" not in citation
        assert f"{FREEBMD_LINK}<br/>" in citation

    def test_semicolon_separator(self, freebmd_input):
        options = {"citation_general_sourceReferenceSeparator": "semicolonSpace"}
        citation = build_citation("freebmd", freebmd_input(**options)).citation
        assert '"England & Wales Birth Index"; Volume 1a Page 123' in citation

    def test_italic_title(self, freebmd_input):
        citation = build_citation("freebmd", freebmd_input(citation_general_meaningfulNames="italic")).citation
        assert citation.startswith("<ref>\n''Birth Registration'':\n")

    def test_no_title(self, freebmd_input):
        citation = build_citation("freebmd", freebmd_input(citation_general_meaningfulNames="none")).citation
        assert citation.startswith('<ref>\n"England & Wales Birth Index"')

    def test_without_newlines_in_ref(self, freebmd_input):
        options = {"citation_general_addNewlinesWithinRefs": False}
        citation = build_citation("freebmd", freebmd_input(**options)).citation
        assert "\n" not in citation
        assert citation.startswith("<ref>'''Birth Registration''': ")
        assert citation.endswith(f"{FREEBMD_DATA}</ref>")

    def test_without_breaks(self, freebmd_input):
        options = {"citation_general_addBreaksWithinBody": False}
        citation = build_citation("freebmd", freebmd_input(**options)).citation
        assert "<br/>" not in citation
        assert f"(accessed 5 March 2024)\n{FREEBMD_DATA}" in citation

    def test_indented_data_string(self, freebmd_input):
        citation = build_citation("freebmd", freebmd_input(citation_general_dataStringIndented=True)).citation
        assert f"<br/>\n:{FREEBMD_DATA}" in citation

    def test_invalid_option_uses_default(self, freebmd_input):
        default = build_citation("freebmd", freebmd_input()).citation
        assert build_citation("freebmd", freebmd_input(citation_general_dateFormat="roman")).citation == default


class TestCitationBuilder:
    """Tests for CitationBuilder with hand-set fragments."""

    def test_missing_fragments_omitted(self):
        builder = CitationBuilder(CitationType.INLINE, date(2024, 3, 5))
        builder.source_title = "Parish Registers"
        builder.meaningful_title = "Baptism"

        assert builder.get_citation_string() == "<ref>\n'''Baptism''':\n\"Parish Registers\"\n</ref>"

    def test_title_without_body(self):
        """Test that a meaningful title alone has no trailing colon."""
        inline = CitationBuilder(CitationType.INLINE, date(2024, 3, 5))
        inline.meaningful_title = "Baptism"
        source = CitationBuilder(CitationType.SOURCE, date(2024, 3, 5))
        source.meaningful_title = "Baptism"

        assert inline.get_citation_string() == "<ref>\n'''Baptism'''\n</ref>"
        assert source.get_citation_string() == "* '''Baptism'''"

    def test_reference_without_title(self):
        builder = CitationBuilder("source", date(2024, 3, 5))
        builder.source_reference = "Film 123"
        assert builder.get_citation_string() == "* Film 123"

    def test_unquoted_title(self):
        builder = CitationBuilder("source", date(2024, 3, 5))
        builder.source_title = "Wikipedia contributors"
        builder.put_source_title_in_quotes = False
        assert builder.get_citation_string() == "* Wikipedia contributors"

    def test_dict_options_wrapped(self):
        builder = CitationBuilder("inline", date(2024, 3, 5), {"citation_general_dateFormat": "iso"})
        assert isinstance(builder.get_options(), Options)
        assert builder.get_options()["citation_general_dateFormat"] == "iso"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            CitationBuilder("footnote", date(2024, 3, 5))


class TestCleanup:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a,, b", "a, b"),
            ("Smith ,Jones", "Smith,Jones"),
            ("end..", "end."),
            ("...", "..."),
            ("a,.", "a."),
            ("value,<br/>next", "value<br/>next"),
            ("a   b", "a b"),
        ],
    )
    def test_cleanup_citation_text(self, text, expected):
        assert cleanup_citation_text(text) == expected

    def test_format_run_date(self):
        assert format_run_date(date(2024, 12, 25), "long") == "25 December 2024"
