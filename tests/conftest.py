"""Shared pytest fixtures for isoctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from isoctl.config.settings import IsoSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> IsoSettings:
    """Code-default settings (no TOML, no flags)."""
    return IsoSettings()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ISOCTL_* environment out of the tests."""
    for name in (
        "ISOCTL_CONFIG",
        "ISOCTL_QUIET",
        "ISOCTL_JSON_OUTPUT",
        "ISOCTL_VERBOSE",
        "ISOCTL_LOG_JSON",
        "ISOCTL_DURATION__STRICT",
        "ISOCTL_WEEK__INCLUDE_WEEKDAY",
        "ISOCTL_OUTPUT__WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no isoctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes; tests that drop a config file in can request ``tmp_path``.
    """
    monkeypatch.chdir(tmp_path)
