"""Tests for yamlenv.loader"""

from pathlib import Path
from unittest import mock

import pytest

from yamlenv import ConfigNotFoundError, ParseError, load


class TestLoad:
    """Tests for reading YAML config files."""

    def test_loads_nested_document(self, write_yaml):
        path = write_yaml("api:\n  base_url: https://x.test\n  timeout: 1000\nhosts:\n  - a\n  - b\n")

        assert load(path) == {
            "api": {"base_url": "https://x.test", "timeout": 1000},
            "hosts": ["a", "b"],
        }

    def test_accepts_string_path(self, write_yaml):
        path = write_yaml("debug: true\n")
        assert load(str(path)) == {"debug": True}

    def test_empty_file_is_none(self, write_yaml):
        assert load(write_yaml("")) is None

    def test_scalar_document(self, write_yaml):
        assert load(write_yaml("just a string\n")) == "just a string"

    @pytest.mark.parametrize("path", ["", "   "])
    def test_empty_path_raises(self, path):
        with pytest.raises(ConfigNotFoundError, match="File name not specified"):
            load(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load(tmp_path / "nonexistent.yaml")

        assert exc_info.value.details["path"].endswith("nonexistent.yaml")

    def test_directory_is_not_found(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError):
            load(tmp_path)

    def test_unreadable_file_raises_not_found(self, write_yaml):
        path = write_yaml("debug: true\n")

        with mock.patch.object(Path, "read_text", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(ConfigNotFoundError) as exc_info:
                load(path)

        assert exc_info.value.details["reason"].endswith("Permission denied")
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_malformed_yaml_raises_parse_error(self, write_yaml):
        path = write_yaml("api:\n  base_url: [unclosed\n")

        with pytest.raises(ParseError) as exc_info:
            load(path)

        assert exc_info.value.code == "PARSE_ERROR"
        assert "line" in exc_info.value.details
        assert exc_info.value.__cause__ is not None

    def test_undecodable_file_raises_parse_error(self, tmp_path: Path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"key: \xff\xfe\n")

        with pytest.raises(ParseError):
            load(path)

    def test_unsafe_tags_are_rejected(self, write_yaml):
        path = write_yaml("value: !!python/object/apply:os.getcwd []\n")

        with pytest.raises(ParseError):
            load(path)
