"""Rich Console factory and theme for endzeit output.

Result text is rendered into a StringIO buffer, preserving the
``format_result() -> str`` contract. The progress line is the one
exception: it is drawn live on the console handed to the renderer.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import IO

from rich.console import Console
from rich.theme import Theme

ENDZEIT_THEME = Theme(
    {
        "endzeit.ok": "bold green",
        "endzeit.error": "bold red",
        "endzeit.warning": "bold yellow",
        "endzeit.op": "bold cyan",
        "endzeit.key": "dim",
        "endzeit.label": "bold",
        "endzeit.target": "bold blue",
        "endzeit.bar.filled": "green",
        "endzeit.bar.empty": "dim",
        "endzeit.percent": "magenta",
        "endzeit.done": "bold green",
    }
)


def create_console(
    *,
    file: IO[str] | None = None,
    no_color: bool = False,
    width: int | None = None,
) -> Console:
    """Create a themed Console.

    Args:
        file: Stream to write to. Defaults to a fresh StringIO buffer.
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=file if file is not None else StringIO(),
        theme=ENDZEIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or (None if file is not None else 120),
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
