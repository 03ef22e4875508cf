"""Locating and reading ``isoctl.toml``.

Lookup order for the config file:
  1. ``--config PATH`` (an explicit path that does not exist means "no file")
  2. ``ISOCTL_CONFIG`` env var
  3. The nearest ``isoctl.toml`` in the working directory or any parent
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "isoctl.toml"
CONFIG_ENV_VAR = "ISOCTL_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    here = start.resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return ``$ISOCTL_CONFIG`` if set, else the nearest isoctl.toml above *start*."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None
    return next((c for c in _candidates(start or Path.cwd()) if c.is_file()), None)


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Apply the lookup order above and return the file to read, if any."""
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(start)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a CLI error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

