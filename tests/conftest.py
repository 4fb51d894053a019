"""Shared fakes for the terminal and input collaborators."""

from __future__ import annotations

import pytest

from frogger.app.exceptions import TerminalError
from frogger.domain.command import Command


class FakeSurface:
    """In-memory Surface that records every command and can be told to fail."""

    def __init__(self, fail_on: set[str] | None = None, size: tuple[int, int] = (80, 24)) -> None:
        self.fail_on = set(fail_on or ())
        self.columns, self.rows = size
        self.calls: list[str] = []
        self.cells: dict[tuple[int, int], str] = {}
        self.cursor_visible = True

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise TerminalError(f"{name} failed")

    def put(self, x, y, text, fg=None, bg=None):
        self._maybe_fail("put")
        for i, ch in enumerate(text):
            self.cells[(x + i, y)] = ch

    def clear(self):
        self._maybe_fail("clear")
        self.cells.clear()

    def hide_cursor(self):
        self._maybe_fail("hide_cursor")
        self.cursor_visible = False

    def show_cursor(self):
        self._maybe_fail("show_cursor")
        self.cursor_visible = True

    def refresh(self):
        self._maybe_fail("refresh")

    def size(self):
        self._maybe_fail("size")
        return self.columns, self.rows

    def glyph(self, x: int, y: int) -> str:
        return self.cells.get((x, y), " ")


class ScriptedInput:
    """InputSource replaying a fixed list of commands, then quitting."""

    def __init__(self, commands, on_read=None) -> None:
        self._commands = list(commands)
        self._on_read = on_read
        self.reads = 0

    def read(self) -> Command:
        self.reads += 1
        if self._on_read is not None:
            self._on_read()
        if self._commands:
            return self._commands.pop(0)
        return Command.QUIT


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def make_surface():
    return FakeSurface


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def clock():
    return FakeClock()
