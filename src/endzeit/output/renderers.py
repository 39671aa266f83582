"""Progress rendering for the countdown loop.

:class:`ProgressRenderer` is handed to the engine as its tick callback.
On a terminal it redraws a single line in place; on any other stream
(pipes, log files, tests, ``TERM=dumb``) it writes one line per tick,
since Rich drops cursor control codes there.

Line layout::

    Endzeit: 2030-01-01 00:00:00 [=========                 ] 18.00%
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from endzeit.config.models import DisplayConfig

if TYPE_CHECKING:
    from rich.console import Console

    from endzeit.domain.models import CountdownState

_REDRAW = Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))


def filled_slots(percentage: float, width: int) -> int:
    """Number of filled bar slots for *percentage*, within ``[0, width]``."""
    return min(max(int(percentage / 100.0 * width), 0), width)


def progress_line(state: CountdownState, display: DisplayConfig | None = None) -> Text:
    """Build the styled progress line for *state*."""
    display = display or DisplayConfig()
    filled = filled_slots(state.percentage, display.bar_width)
    target = state.target.strftime(display.timestamp_format)
    return Text.assemble(
        (f"{display.label}: ", "endzeit.label"),
        (target, "endzeit.target"),
        " [",
        (display.fill_char * filled, "endzeit.bar.filled"),
        (display.empty_char * (display.bar_width - filled), "endzeit.bar.empty"),
        "] ",
        (f"{state.percentage:.2f}%", "endzeit.percent"),
    )


class ProgressRenderer:
    """Draws countdown progress on a Rich console."""

    def __init__(self, console: Console, display: DisplayConfig | None = None) -> None:
        self._console = console
        self._display = display or DisplayConfig()

    def __call__(self, state: CountdownState) -> None:
        self.render(state)

    def render(self, state: CountdownState) -> None:
        line = progress_line(state, self._display)
        if self._console.is_terminal and not self._console.is_dumb_terminal:
            self._console.control(_REDRAW)
            self._console.print(line, end="", soft_wrap=True)
            if state.complete:
                self._console.print()
        else:
            self._console.print(line, soft_wrap=True)

        if state.complete:
            self._console.print(Text(f"{self._display.label} reached!", style="endzeit.done"))
