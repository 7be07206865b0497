"""Tests for EnvReader."""

from pathlib import Path

import pytest

from fflens.config.env import EnvReader


class TestEnvReader:
    """Tests for typed environment reads."""

    def test_get_str(self) -> None:
        reader = EnvReader(env={"FFLENS_LOG_LEVEL": "debug"})
        assert reader.get_str("FFLENS_LOG_LEVEL") == "debug"
        assert reader.get_str("FFLENS_LOG_FORMAT", "text") == "text"

    def test_get_float(self) -> None:
        reader = EnvReader(env={"FFLENS_PROBE_RETRY_DELAY": "0.5"})
        assert reader.get_float("FFLENS_PROBE_RETRY_DELAY", 2.0) == 0.5

    def test_invalid_float_warns_and_defaults(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        reader = EnvReader(env={"FFLENS_PROBE_RETRY_DELAY": "soon"})

        assert reader.get_float("FFLENS_PROBE_RETRY_DELAY", 2.0) == 2.0
        assert "Invalid float value for FFLENS_PROBE_RETRY_DELAY" in caplog.text

    def test_get_int(self) -> None:
        reader = EnvReader(env={"N": "7", "BAD": "7.5"})
        assert reader.get_int("N") == 7
        assert reader.get_int("BAD", 1) == 1

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("1", True), ("YES", True), ("on", True), ("no", False)],
    )
    def test_get_bool(self, value: str, expected: bool) -> None:
        assert EnvReader(env={"FLAG": value}).get_bool("FLAG") is expected

    def test_get_path_must_exist(self, fake_ffmpeg: Path, temp_dir: Path) -> None:
        reader = EnvReader(
            env={"GOOD": str(fake_ffmpeg), "BAD": str(temp_dir / "nope")}
        )
        assert reader.get_path("GOOD") == fake_ffmpeg
        assert reader.get_path("BAD") is None
        assert reader.get_path("BAD", must_exist=False) == temp_dir / "nope"
