"""Tests for cli/exit_codes.py module."""

from fflens.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within their documented ranges."""
        assert 1 <= ExitCode.GENERAL_ERROR <= 9
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 20 <= ExitCode.TARGET_NOT_FOUND <= 29
        assert 20 <= ExitCode.NO_STREAMS_FOUND <= 29
        assert 30 <= ExitCode.FFMPEG_NOT_FOUND <= 39
        assert 40 <= ExitCode.ENCODER_UNAVAILABLE <= 49
        assert 50 <= ExitCode.PARSE_ERROR <= 59

    def test_does_not_collide_with_click_usage_error(self) -> None:
        """Click exits with 2 on usage errors."""
        assert 2 not in {int(code) for code in ExitCode}
