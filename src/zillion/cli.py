"""Root CLI group for zillion with global flags and command registration."""

from __future__ import annotations

import click

from zillion import __version__
from zillion.commands import register_commands
from zillion.commands._base import Example, ZillionGroup
from zillion.commands._context import AppContext
from zillion.config.settings import ZillionSettings
from zillion.domain.types import Scale, Scheme


@click.group(
    cls=ZillionGroup,
    invoke_without_command=True,
    examples=(
        Example("name 123456789", "123456789"),
        Example("power 100", "100", power=True),
        Example("-s short -n conway name 1000000", "1000000"),
        Example("--json power 3003"),
    ),
)
@click.version_option(version=__version__, prog_name="zillion")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print names only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-n",
    "--scheme",
    type=click.Choice([s.value for s in Scheme]),
    default=None,
    help="Scheme for transforming numbers into names (default: conway).",
)
@click.option(
    "-s",
    "--scale",
    type=click.Choice([s.value for s in Scale]),
    default=None,
    help="Scale used by the Conway-Wechsler scheme (default: short).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    scheme: str | None,
    scale: str | None,
) -> None:
    """zillion — natural-language names for arbitrarily large numbers."""
    ctx.ensure_object(dict)
    settings = ZillionSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        scheme=scheme,
        scale=scale,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
