"""Command: name a power of ten."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zillion.commands._base import Example, ZillionCommand

if TYPE_CHECKING:
    from zillion.commands._context import AppContext


@click.command(
    "power",
    cls=ZillionCommand,
    examples=(
        Example("6", "6", power=True),
        Example("3003", "3003", power=True),
        Example("+0100", "+0100", power=True),
    ),
)
@click.argument("exponent", required=False)
@click.pass_obj
def power_cmd(app: AppContext, exponent: str | None) -> None:
    """Print the name of 10**EXPONENT (reads lines from stdin if omitted)."""
    service = app.naming
    for text in app.inputs(exponent):
        app.emit(service.power_of_ten(text))
