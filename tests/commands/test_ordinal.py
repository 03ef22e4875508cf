"""Tests for the ordinal command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from isoctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestOrdinalCommands:
    def test_format(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "ordinal", "format", "2020-12-31"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2020-366"

    def test_format_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "ordinal", "format", "2021-03-01"])
        data = json.loads(result.stdout)
        assert data["data"] == {"text": "2021-060", "year": 2021, "day_of_year": 60}

    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "ordinal", "parse", "2020-366"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2020-12-31"

    def test_parse_range_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["ordinal", "parse", "2019-366"])
        assert result.exit_code == 1
        assert "RANGE_ERROR" in result.stderr

    def test_parse_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["ordinal", "parse", "2020-001"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "2020-01-01" in result.stdout
