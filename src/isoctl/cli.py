"""``isoctl`` entry point: global output/config flags and subcommand wiring."""

from __future__ import annotations

import click

from isoctl import __version__
from isoctl.commands import register_commands
from isoctl.commands._base import IsoGroup
from isoctl.commands._context import AppContext
from isoctl.config.logging import bind_command
from isoctl.config.settings import IsoSettings

_ROOT_EXAMPLES = """\
isoctl week format 2000-01-01
isoctl -q week parse 1999-W52
isoctl --json duration parse P1DT1H
isoctl -c ./strict.toml duration parse P1D
isoctl ordinal format 2020-12-31"""


@click.group(
    "isoctl",
    cls=IsoGroup,
    examples=_ROOT_EXAMPLES,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="isoctl")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Show error details and debug logs.")
@click.option("--log-json", is_flag=True, help="Emit stderr logs as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this file instead of the discovered isoctl.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """isoctl: ISO 8601 week dates, ordinal dates, and durations."""
    ctx.obj = AppContext(IsoSettings.from_cli(config_path=config_path, **flags))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return
    bind_command(f"{ctx.info_name} {ctx.invoked_subcommand}")


register_commands(cli)
