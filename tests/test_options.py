"""Tests for citation options and environment settings."""

import json

import pytest

from record_sourcer.config import OPTION_DEFINITIONS, Options, Settings, get_default_options


class TestOptions:
    """Tests for option defaults and validation."""

    def test_defaults(self):
        options = Options()
        assert options["citation_general_meaningfulNames"] == "bold"
        assert options["citation_general_addAccessedDate"] == "parenAfterLink"
        assert options["addMerge_fsAllCitations_citationType"] == "narrative"
        assert options["table_general_autoGenerate"] == "none"

    def test_every_default_is_allowed(self):
        for key, (default, allowed) in OPTION_DEFINITIONS.items():
            assert allowed is None or default in allowed, key

    def test_invalid_value_reads_as_default(self):
        options = Options({"citation_general_dateFormat": "roman"})
        assert options["citation_general_dateFormat"] == "long"

    def test_unknown_key(self):
        options = Options({"site_extra": 1})
        assert options["site_extra"] == 1
        assert options.get("missing") is None
        with pytest.raises(KeyError):
            options["missing"]

    def test_mapping_view(self):
        options = Options({"site_extra": 1})
        assert dict(options) == {**get_default_options(), "site_extra": 1}
        assert len(options) == len(OPTION_DEFINITIONS) + 1

    def test_with_overrides_leaves_original(self):
        options = Options({"citation_general_dateFormat": "short"})
        changed = options.with_overrides(citation_general_dateFormat="iso")
        assert changed["citation_general_dateFormat"] == "iso"
        assert options["citation_general_dateFormat"] == "short"

    def test_from_file(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text(json.dumps({"table_general_format": "list"}))
        assert Options.from_file(path)["table_general_format"] == "list"

    def test_from_file_not_object(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            Options.from_file(path)

    def test_default_options_are_fresh(self):
        first = get_default_options()
        first["citation_general_dateFormat"] = "iso"
        assert get_default_options()["citation_general_dateFormat"] == "long"


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.prefetch_max_attempts == 100
        assert settings.prefetch_delay == 0.1
        assert settings.http_timeout == 30.0

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.prefetch_max_attempts = 5
