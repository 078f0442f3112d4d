"""Click base classes whose ``--examples`` flag shows live names.

Commands declare their examples as :class:`Example` entries. Passing
``--examples`` prints each invocation followed by the name it produces
under the current scheme, scale and config, so the examples can never
drift from what the command actually prints.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import click

from zillion.commands._context import AppContext


@dataclass(frozen=True)
class Example:
    """One example invocation.

    Attributes:
        args: Arguments after the command path, e.g. ``"name 1000000"``.
        value: Input to name for the preview line; None prints no preview.
        power: Name ``10**value`` instead of *value*.
    """

    args: str
    value: str | None = None
    power: bool = False


def _preview(ctx: click.Context, example: Example) -> str | None:
    if example.value is None:
        return None
    app = ctx.find_object(AppContext)
    if app is not None:
        service = app.naming
    else:
        # Group-level --examples runs before the group callback builds AppContext.
        from zillion.config.settings import ZillionSettings
        from zillion.services.naming import NamingService

        service = NamingService.from_settings(ZillionSettings.from_cli())
    if example.power:
        result = service.power_of_ten(example.value)
    else:
        result = service.full_name(example.value)
    if result.ok:
        return str(result.data["name"])
    msg = result.error.message if result.error else "unknown error"
    return f"error: {msg}"


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for example in examples:
            click.echo(f"  {ctx.command_path} {example.args}")
            preview = _preview(ctx, example)
            if preview is not None:
                click.echo(click.style(f"      {preview}", dim=True))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show example invocations with the names they print.",
        )
    )


class ZillionCommand(click.Command):
    """Command with an optional ``examples=`` list of :class:`Example`."""

    def __init__(
        self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)


class ZillionGroup(click.Group):
    """Group counterpart of :class:`ZillionCommand`; subcommands default to it."""

    command_class = ZillionCommand

    def __init__(
        self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
