"""Tests for JSON config loading."""

import json

import pytest

from twofa_analyzer.config import load_config
from twofa_analyzer.exceptions import ConfigurationError


def write_config(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content))
    return str(path)


class TestLoadConfig:
    def test_loads_folders_in_order(self, tmp_path):
        path = write_config(tmp_path, {"folders": ["/logs/b", "/logs/a", "//server/share"]})
        assert load_config(path) == ["/logs/b", "/logs/a", "//server/share"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="failed to open config file"):
            load_config(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = write_config(tmp_path, "{folders: [")
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_config(path)

    @pytest.mark.parametrize("content", [{"folders": []}, {}, {"other": ["/x"]}])
    def test_no_folders(self, tmp_path, content):
        path = write_config(tmp_path, content)
        with pytest.raises(ConfigurationError, match="no folders specified"):
            load_config(path)

    @pytest.mark.parametrize("content", [["/x"], {"folders": "/x"}, {"folders": [1, 2]}])
    def test_wrong_shape(self, tmp_path, content):
        path = write_config(tmp_path, content)
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_config(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"folders": ["/logs/\xff"]}')
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_config(str(path))

    def test_null_folders(self, tmp_path):
        path = write_config(tmp_path, {"folders": None})
        with pytest.raises(ConfigurationError, match="no folders specified"):
            load_config(path)

    @pytest.mark.parametrize("folders", ["", 0, {}, False])
    def test_empty_values_of_wrong_type(self, tmp_path, folders):
        path = write_config(tmp_path, {"folders": folders})
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_config(path)
