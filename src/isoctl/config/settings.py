"""IsoSettings: one frozen object for flags, environment, and isoctl.toml.

Sources, strongest first:

==============  ==========================================================
init kwargs     global CLI flags (``--json``, ``-q``, ``-v``, ``--log-json``)
environment     ``ISOCTL_QUIET``, ``ISOCTL_DURATION__STRICT``, ...
isoctl.toml     ``[week]``, ``[duration]``, ``[output]`` sections
defaults        the section models in :mod:`isoctl.config.models`
==============  ==========================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from isoctl.config.discovery import read_toml, resolve_config
from isoctl.config.models import DurationConfig, OutputConfig, WeekConfig

# File the TOML source reads while an IsoSettings is being built.
_active_toml: ContextVar[Path | None] = ContextVar("isoctl_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds the sections of an isoctl.toml into settings construction."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections = read_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self._sections.items()
            if name in self.settings_cls.model_fields
        }


class IsoSettings(BaseSettings):
    """Settings shared by the CLI's AppContext and every service.

    Constructing ``IsoSettings()`` directly reads only the environment and
    defaults; :meth:`from_cli` also brings in the TOML file.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISOCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    week: WeekConfig = Field(default_factory=WeekConfig)
    duration: DurationConfig = Field(default_factory=DurationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> IsoSettings:
        """Build settings for one CLI invocation.

        *config_path* is the ``--config`` value; without it the file is
        found through ``ISOCTL_CONFIG`` or a walk up from *start* (cwd by
        default).
        """
        toml_path = resolve_config(config_path, start)
        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
