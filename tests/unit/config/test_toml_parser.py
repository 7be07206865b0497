"""Tests for TOML config file parsing."""

from pathlib import Path

import pytest

from fflens.config.toml_parser import TomlParseError, load_toml_file, parse_toml


class TestParseToml:
    """Tests for parse_toml function."""

    def test_sections(self) -> None:
        data = parse_toml(
            "[probe]\nretry_delay_seconds = 1.5\n[tools]\nffmpeg = \"/x\"\n"
        )
        assert data == {
            "probe": {"retry_delay_seconds": 1.5},
            "tools": {"ffmpeg": "/x"},
        }


class TestLoadTomlFile:
    """Tests for load_toml_file function."""

    def test_missing_file(self, temp_dir: Path) -> None:
        assert load_toml_file(temp_dir / "missing.toml") == {}

    def test_invalid_file_lenient(
        self, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = temp_dir / "config.toml"
        path.write_text("[probe\n")

        assert load_toml_file(path) == {}
        assert "Ignoring unreadable config file" in caplog.text

    def test_invalid_file_strict(self, temp_dir: Path) -> None:
        path = temp_dir / "config.toml"
        path.write_text("[probe\n")

        with pytest.raises(TomlParseError) as exc_info:
            load_toml_file(path, strict=True)
        assert exc_info.value.path == path
