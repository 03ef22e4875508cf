"""Tests for the duration command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from isoctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDurationParse:
    def test_quiet_prints_seconds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "parse", "P1DT1H"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "90000.0"

    def test_json_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "duration", "parse", "P45DT3H3.266662S"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["canonical"] == "PT1083H0M3.266S"

    def test_discarded_components_warn(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "parse", "P1Y1DT"])
        assert result.exit_code == 0
        assert "WARNING: years component ignored" in result.stderr

    def test_compat_rejects_missing_t(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "parse", "P1D"])
        assert result.exit_code == 1
        assert "FORMAT_ERROR" in result.stderr

    def test_strict_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "parse", "P1D", "--strict"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "86400.0"

    def test_strict_rejects_years(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "duration", "parse", "P1Y", "--strict"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "RANGE_ERROR"

    def test_strict_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "isoctl.toml").write_text("[duration]\nstrict = true\n")
        result = cli_runner.invoke(cli, ["-q", "duration", "parse", "P1D"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "86400.0"

    def test_compat_flag_beats_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "isoctl.toml").write_text("[duration]\nstrict = true\n")
        result = cli_runner.invoke(cli, ["duration", "parse", "P1D", "--compat"])
        assert result.exit_code == 1


@pytest.mark.usefixtures("_isolated_cwd")
class TestDurationFormat:
    def test_day(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "format", "86400"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "PT24H0M0S"

    def test_fractional(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "format", "90.5"])
        assert result.stdout.strip() == "PT1M30.5S"

    def test_negative_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "format", "--", "-3600"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "PT-1H0M0S"

    def test_not_a_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "format", "soon"])
        assert result.exit_code == 2

    def test_overflow_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "format", "1e300"])
        assert result.exit_code == 2
        assert "representable" in result.stderr

    @pytest.mark.parametrize("seconds", ["nan", "inf", "-inf"])
    def test_non_finite_is_usage_error(self, cli_runner: CliRunner, seconds: str) -> None:
        result = cli_runner.invoke(cli, ["duration", "format", "--", seconds])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "not a finite number" in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestDurationBetween:
    def test_utc_timestamps(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "duration", "between", "2020-01-02T00:00:00Z", "2020-01-03T00:00:00Z"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "PT24H0M0S"

    def test_offsets_normalised(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "duration", "between", "2020-01-01T12:00:00+02:00", "2020-01-01T12:00:00Z"],
        )
        assert result.stdout.strip() == "PT2H0M0S"

    def test_mixed_awareness_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["duration", "between", "2020-01-02T00:00:00Z", "2020-01-03T00:00:00"]
        )
        assert result.exit_code == 1
        assert "FORMAT_ERROR" in result.stderr

    def test_bad_timestamp_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "between", "yesterday", "today"])
        assert result.exit_code == 2
