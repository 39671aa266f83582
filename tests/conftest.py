"""Shared pytest fixtures and test helpers for endzeit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from endzeit.config.settings import EndzeitSettings
from endzeit.services.telemetry import disable_telemetry


class FakeClock:
    """Stand-in for the ``time`` module: ``sleep`` advances ``monotonic``.

    Lets the countdown engine run a long countdown instantly while still
    seeing time pass between ticks.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fast_time(monkeypatch: pytest.MonkeyPatch, fake_clock: FakeClock) -> FakeClock:
    """Make every CountdownEngine built during the test use the fake clock."""
    monkeypatch.setattr("endzeit.services.engine.time", fake_clock)
    return fake_clock


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each test from an empty directory with no config env vars.

    Keeps a stray endzeit.toml or ENDZEIT_* variable on the developer's
    machine from leaking into tests.
    """
    for name in ("ENDZEIT_CONFIG", "ENDZEIT_QUIET", "ENDZEIT_VERBOSE", "ENDZEIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    disable_telemetry()


@pytest.fixture
def settings(tmp_path: Path) -> EndzeitSettings:
    """Default settings resolved from the (empty) temp directory."""
    return EndzeitSettings.from_cli(start=tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging(), whose handler may point at CliRunner's stderr."""
    logger = logging.getLogger("endzeit")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
