"""Tests for the week command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from isoctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestWeekFormat:
    def test_long_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["week", "format", "2020-03-01"])
        assert result.exit_code == 0
        assert "2020-W09-7" in result.stdout

    def test_short_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "format", "2020-03-01", "--short"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2020-W09"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "week", "format", "2000-01-01"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "format_week"
        assert data["data"]["text"] == "1999-W52-6"
        assert data["warnings"] == ["2000-01-01 belongs to ISO year 1999"]

    def test_year_boundary_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["week", "format", "2000-01-01"])
        assert result.exit_code == 0
        assert "WARNING: 2000-01-01 belongs to ISO year 1999" in result.stderr
        assert "WARNING" not in result.stdout

    def test_quiet_suppresses_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "format", "2000-01-01"])
        assert result.stdout.strip() == "1999-W52-6"
        assert result.stderr == ""

    def test_config_selects_short_form(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "isoctl.toml").write_text("[week]\ninclude_weekday = false\n")
        result = cli_runner.invoke(cli, ["-q", "week", "format", "2020-03-01"])
        assert result.stdout.strip() == "2020-W09"

    def test_long_flag_beats_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "isoctl.toml").write_text("[week]\ninclude_weekday = false\n")
        result = cli_runner.invoke(cli, ["-q", "week", "format", "2020-03-01", "--long"])
        assert result.stdout.strip() == "2020-W09-7"

    def test_invalid_date_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["week", "format", "2019-02-29"])
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestWeekParse:
    def test_long_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "parse", "1999-W52-6"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2000-01-01"

    def test_short_form_is_monday(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "parse", "1999-W52"])
        assert result.stdout.strip() == "1999-12-27"

    def test_verbose_shows_resolved_week(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "week", "parse", "2020-W09-7"])
        assert result.exit_code == 0
        assert "2020-03-01" in result.stdout
        assert "iso_year" in result.stdout

    def test_resolved_week_hidden_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["week", "parse", "2020-W09-7"])
        assert result.exit_code == 0
        assert "iso_year" not in result.stdout

    def test_format_error_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["week", "parse", "I-LOVE-CATS"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "FORMAT_ERROR" in result.stderr

    def test_range_error_json_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "week", "parse", "2021-W53"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "RANGE_ERROR"
        assert payload["error"]["detail"] == {"input": "2021-W53"}


@pytest.mark.usefixtures("_isolated_cwd")
class TestWeekCount:
    @pytest.mark.parametrize("year,weeks", [("2020", "53"), ("2021", "52"), ("2026", "53")])
    def test_count(self, cli_runner: CliRunner, year: str, weeks: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "count", year])
        assert result.exit_code == 0
        assert result.stdout.strip() == weeks

    def test_out_of_range_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "week", "count", "10000"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: year_weeks")
