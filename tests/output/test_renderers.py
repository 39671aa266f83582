"""Tests for the countdown progress renderer."""

from datetime import datetime
from io import StringIO

import pytest
from rich.console import Console

from endzeit.config.models import DisplayConfig
from endzeit.domain.models import CountdownState
from endzeit.output.console import ENDZEIT_THEME, create_console
from endzeit.output.renderers import ProgressRenderer, filled_slots, progress_line

TARGET = datetime(2030, 1, 1, 0, 0, 0)


def _state(elapsed: int, total: int = 200) -> CountdownState:
    return CountdownState(target=TARGET, total_seconds=total, elapsed_seconds=elapsed)


class TestFilledSlots:
    @pytest.mark.parametrize(
        ("pct", "expected"),
        [(0.0, 0), (1.99, 0), (2.0, 1), (25.0, 12), (50.0, 25), (99.99, 49), (100.0, 50)],
    )
    def test_proportional(self, pct: float, expected: int) -> None:
        assert filled_slots(pct, 50) == expected

    def test_clamped(self) -> None:
        assert filled_slots(-5.0, 50) == 0
        assert filled_slots(250.0, 50) == 50


class TestProgressLine:
    def test_layout(self) -> None:
        line = progress_line(_state(50)).plain
        assert line == "Endzeit: 2030-01-01 00:00:00 [" + "=" * 12 + " " * 38 + "] 25.00%"

    def test_bar_always_full_width(self) -> None:
        for elapsed in (0, 1, 77, 133, 200):
            plain = progress_line(_state(elapsed)).plain
            bar = plain[plain.index("[") + 1 : plain.index("]")]
            assert len(bar) == 50

    def test_two_decimal_percentage(self) -> None:
        assert progress_line(_state(1, total=3)).plain.endswith("] 33.33%")

    def test_complete(self) -> None:
        assert progress_line(_state(200)).plain.endswith("[" + "=" * 50 + "] 100.00%")

    def test_custom_display(self) -> None:
        display = DisplayConfig(
            label="Launch", bar_width=10, fill_char="#", empty_char=".", timestamp_format="%H:%M"
        )
        line = progress_line(_state(100), display).plain
        assert line == "Launch: 00:00 [#####.....] 50.00%"


class TestProgressRenderer:
    def test_non_terminal_writes_one_line_per_tick(self) -> None:
        buf = StringIO()
        renderer = ProgressRenderer(create_console(file=buf))
        for elapsed in (0, 100):
            renderer(_state(elapsed))
        lines = buf.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("] 0.00%")
        assert lines[1].endswith("] 50.00%")
        assert "\r" not in buf.getvalue()

    def test_completion_line(self) -> None:
        buf = StringIO()
        renderer = ProgressRenderer(create_console(file=buf))
        renderer(_state(200))
        lines = buf.getvalue().splitlines()
        assert lines[0].endswith("] 100.00%")
        assert lines[1] == "Endzeit reached!"

    def test_completion_line_uses_label(self) -> None:
        buf = StringIO()
        ProgressRenderer(create_console(file=buf), DisplayConfig(label="Deadline")).render(
            _state(0, total=0)
        )
        assert buf.getvalue().splitlines()[-1] == "Deadline reached!"

    def test_no_wrap_on_narrow_console(self) -> None:
        buf = StringIO()
        ProgressRenderer(create_console(file=buf, width=40)).render(_state(10))
        assert len(buf.getvalue().splitlines()) == 1

    def test_terminal_redraws_in_place(self) -> None:
        buf = StringIO()
        console = Console(
            file=buf,
            force_terminal=True,
            theme=ENDZEIT_THEME,
            width=200,
            _environ={"TERM": "xterm-256color"},
        )
        renderer = ProgressRenderer(console)
        renderer(_state(0))
        renderer(_state(100))
        renderer(_state(200))
        output = buf.getvalue()
        assert output.count("\r\x1b[2K") == 3
        assert output.count("\n") == 2  # after the final bar, after "reached!"
        assert "Endzeit reached!" in output
