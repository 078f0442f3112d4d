"""Rich Console factory and theme for zillion output.

Consoles render into a StringIO buffer so every renderer keeps the
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ZILLION_THEME = Theme(
    {
        "zillion.ok": "bold green",
        "zillion.error": "bold red",
        "zillion.op": "bold cyan",
        "zillion.key": "dim",
        "zillion.name": "bold",
        "zillion.input": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Soft wrapping keeps every name on a single line however long it is.
    """
    return Console(
        file=StringIO(),
        theme=ZILLION_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
