"""AppContext: the object every subcommand receives via ``@click.pass_obj``.

It is built once by the root group from the resolved IsoSettings, sets up
logging, hands out services bound to those settings, and owns the single
place where results reach the terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from isoctl.config.logging import configure_logging
from isoctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from isoctl.config.settings import IsoSettings
    from isoctl.services.base import BaseService
    from isoctl.services.result import ServiceResult

S = TypeVar("S", bound="BaseService")

# Exit status for a result with ok=False; click uses 2 for usage errors.
EXIT_REJECTED = 1


class AppContext:
    def __init__(self, settings: IsoSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            width=settings.output.width,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self, service_cls: type[S]) -> S:
        """Instantiate *service_cls* with this invocation's settings."""
        return service_cls(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Accepted results go to stdout, with warnings on stderr unless the
        output is JSON (warnings are in the payload) or quiet.  Rejected
        results go to stderr and end the process with EXIT_REJECTED.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(EXIT_REJECTED)

        click.echo(text)
        if self.output.json_output or self.output.quiet:
            return
        for warning in result.warnings:
            click.secho(f"WARNING: {warning}", err=True, fg="yellow")
