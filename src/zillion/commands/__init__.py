"""Subcommand modules for zillion.

Provides register_commands() which uses deferred imports to keep
``zillion --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from zillion.commands.name import name_cmd
    from zillion.commands.power import power_cmd

    cli.add_command(name_cmd)
    cli.add_command(power_cmd)
