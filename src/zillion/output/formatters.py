"""Output mode selection for ServiceResult.

The CLI prints a ServiceResult for humans (Rich), for scripts
(``--quiet``: the name alone), or for machines (``--json``: the full
result). :func:`format_result` picks the mode from OutputSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from zillion.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from zillion.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON wins over quiet, and quiet wins over verbose.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
