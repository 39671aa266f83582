"""Text output helpers for ServiceResult.

Results are rendered for humans: a status line, then indented
key-value pairs. Verbose mode adds error detail and telemetry.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from endzeit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from endzeit.services.result import ServiceResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _fields(console: Console, data: dict[str, Any], indent: int = 2) -> None:
    prefix = " " * indent
    for key, value in data.items():
        console.print(
            Text(f"{prefix}{key}: ", style="endzeit.key"), Text(_format_value(value)), sep=""
        )


def _telemetry(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    """Render a span tree, one line per span."""
    prefix = " " * indent
    console.print(f"{prefix}{span.get('name', '?')} {span.get('duration_ms', 0.0):.2f}ms")
    for child in span.get("children", []):
        _telemetry(console, child, indent + 2)


def format_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        verbose: Include error detail and the telemetry span tree.
    """
    console = create_console()
    if result.ok:
        console.print(Text("OK:", style="endzeit.ok"), Text(result.op, style="endzeit.op"))
        if result.data:
            _fields(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR:", style="endzeit.error"),
            Text(result.op, style="endzeit.op"),
            Text(f"— {message}"),
        )
        if verbose and result.error and result.error.detail:
            console.print(Text("  detail:", style="endzeit.key"))
            _fields(console, result.error.detail, indent=4)

    if verbose and result.meta:
        console.print(Text("  meta:", style="endzeit.key"))
        for key, value in result.meta.items():
            if key == "telemetry":
                _telemetry(console, value)
            else:
                console.print(f"    {key}: {_format_value(value)}")

    return get_output(console).rstrip("\n")
