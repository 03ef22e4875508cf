"""Click command and group classes carrying an ``--examples`` flag.

``examples=`` is an extra keyword on ``@click.command(cls=IsoCommand)`` and
``@click.group(cls=IsoGroup)``.  Subcommands and subgroups declared on an
IsoGroup inherit the classes, so only the top-level decorator names them.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(textwrap.indent(ctx.command.examples, "  "))  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip() if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )


class IsoCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class IsoGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its children default to IsoCommand/IsoGroup."""

    command_class = IsoCommand
    group_class = type
