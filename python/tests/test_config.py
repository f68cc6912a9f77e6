"""Tests for the config module."""

import pytest

from grevoc.config import FALLBACK_DEFAULTS, Configuration
from grevoc.errors import ConfigurationError

SAMPLE_INI = """[general]
allow_online = true
source_language = de
target_language = ru
translator = deepl

[api_keys]
deepl = 1234-abcd:fx
lingvanex = a_secret
"""


class TestConfiguration:
    """Tests for Configuration."""

    def test_defaults(self):
        config = Configuration()
        assert config.allow_online is False
        assert config.get_default("source_language") == "en"
        assert config.get_default("missing", "x") == "x"

    def test_read_from_ini(self, write_file):
        path = write_file("grevoc.ini", SAMPLE_INI)
        config = Configuration.load(path)

        assert config.allow_online is True
        assert config.get_default("source_language") == "de"
        assert config.get_default("translator") == "deepl"
        assert config.get_api_key("deepl") == "1234-abcd:fx"
        assert config.translator_names == ["deepl", "lingvanex"]

    def test_load_missing_file_gives_defaults(self, tmp_path):
        config = Configuration.load(tmp_path / "absent.ini")
        assert config.get_default("target_language") == FALLBACK_DEFAULTS["target_language"]

    def test_read_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Configuration().read_from_ini(tmp_path / "absent.ini")

    def test_malformed_file_raises(self, write_file):
        path = write_file("grevoc.ini", "no section header\nkey = value\n")
        with pytest.raises(ConfigurationError):
            Configuration.load(path)

    def test_get_api_key_unknown(self):
        config = Configuration()
        assert config.get_api_key("deepl") == ""
        assert config.get_api_key("") == ""
        assert config.get_api_key(None) == ""

    def test_set_api_key(self):
        config = Configuration()
        assert config.set_api_key("deepl", "key1")
        assert config.get_api_key("deepl") == "key1"
        assert not config.set_api_key("deepl", "key1")
        assert config.set_api_key("deepl", "key2")
        assert not config.set_api_key("", "key")
        assert not config.set_api_key("deepl", "")
        assert not config.set_api_key(None, None)
        assert config.get_api_key("deepl") == "key2"

    def test_set_default_values(self, write_file):
        config = Configuration.load(write_file("grevoc.ini", SAMPLE_INI))
        config.set_default_values()
        assert config.allow_online is False
        assert config.get_api_key("deepl") == ""

    def test_save_round_trip(self, tmp_path):
        config = Configuration()
        config.allow_online = True
        config.set_api_key("lingvanex", "a_key")
        path = tmp_path / "conf" / "grevoc.ini"

        config.save(path)
        loaded = Configuration.load(path)

        assert loaded.allow_online is True
        assert loaded.get_api_key("lingvanex") == "a_key"
