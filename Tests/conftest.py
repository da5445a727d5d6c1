"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wolf_terminal import config


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty location so user files never leak in."""
    monkeypatch.setenv(config.CONFIG_PATH_ENV_VAR, str(tmp_path / "missing_config.toml"))
    config.load_cli_config(force_reload=True)
    yield
    monkeypatch.delenv(config.CONFIG_PATH_ENV_VAR, raising=False)
    config._CONFIG_CACHE = None


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    """Write a TOML config file and make it the active one."""
    def _write(content: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setenv(config.CONFIG_PATH_ENV_VAR, str(path))
        config.load_cli_config(force_reload=True)
        return path
    return _write


# ========== Timer Fixtures ==========

class ManualTimer:
    """Timer handle that only fires when a test tells it to."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def fire(self) -> None:
        if not self.stopped:
            self.callback()

    def fire_late(self) -> None:
        """Invoke the callback even after stop(), like a tick already in flight."""
        self.callback()

    def stop(self) -> None:
        self.stopped = True


class ManualClock:
    """Timer factory that records every timer it creates."""

    def __init__(self):
        self.timers: List[ManualTimer] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> List[ManualTimer]:
        return [timer for timer in self.timers if not timer.stopped]

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for timer in self.active:
                timer.fire()


@pytest.fixture
def clock():
    """Manual timer factory for driving a RevealScheduler."""
    return ManualClock()


class EventRecorder:
    """Collects update and completion notifications in order."""

    def __init__(self):
        self.events: List[str] = []

    def on_update(self) -> None:
        self.events.append("update")

    def on_complete(self) -> None:
        self.events.append("complete")

    @property
    def updates(self) -> int:
        return self.events.count("update")

    @property
    def completions(self) -> int:
        return self.events.count("complete")


@pytest.fixture
def recorder():
    return EventRecorder()
