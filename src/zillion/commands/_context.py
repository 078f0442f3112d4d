"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to commands via
``@click.pass_obj``. Owns logging/telemetry setup, the NamingService,
input iteration (argument or stdin), and result emission.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import click

from zillion.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from zillion.config.settings import ZillionSettings
    from zillion.services.naming import NamingService
    from zillion.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ZillionSettings) -> None:
        self.settings = settings
        self._naming: NamingService | None = None

        from zillion.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

        if settings.verbose:
            from zillion.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def naming(self) -> NamingService:
        """The naming service (created lazily on first access)."""
        if self._naming is None:
            from zillion.services.naming import NamingService

            self._naming = NamingService.from_settings(self.settings)
        return self._naming

    def inputs(self, value: str | None) -> Iterator[str]:
        """Yield *value*, or stripped stdin lines up to EOF or the first blank line."""
        if value is not None:
            yield value
            return
        for line in click.get_text_stream("stdin"):
            stripped = line.strip()
            if not stripped:
                break
            yield stripped

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes the name to stdout and returns.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
