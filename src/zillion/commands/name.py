"""Command: name a numeral."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zillion.commands._base import Example, ZillionCommand

if TYPE_CHECKING:
    from zillion.commands._context import AppContext


@click.command(
    "name",
    cls=ZillionCommand,
    examples=(
        Example("1000000", "1000000"),
        Example("000123456789", "000123456789"),
        Example("1,000", "1,000"),
        Example("--power 303", "303", power=True),
    ),
)
@click.argument("number", required=False)
@click.option("-p", "--power", is_flag=True, help="Name 10**NUMBER instead of NUMBER.")
@click.pass_obj
def name_cmd(app: AppContext, number: str | None, power: bool) -> None:
    """Print the English name of NUMBER (reads lines from stdin if omitted)."""
    service = app.naming
    for text in app.inputs(number):
        app.emit(service.power_of_ten(text) if power else service.full_name(text))
