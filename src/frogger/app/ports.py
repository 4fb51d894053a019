from __future__ import annotations

from enum import Enum
from typing import Protocol

from frogger.domain.command import Command


class Color(Enum):
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class Surface(Protocol):
    """
    Write-only character display addressed in grid cells.
    Every method raises TerminalError when the underlying terminal fails.
    """

    def put(self, x: int, y: int, text: str, fg: Color | None = None, bg: Color | None = None) -> None:
        ...

    def clear(self) -> None:
        ...

    def hide_cursor(self) -> None:
        ...

    def show_cursor(self) -> None:
        ...

    def refresh(self) -> None:
        ...

    def size(self) -> tuple[int, int]:  # (columns, rows)
        ...


class InputSource(Protocol):
    def read(self) -> Command:  # blocks until one event arrives
        ...
