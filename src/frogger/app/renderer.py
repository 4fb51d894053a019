from __future__ import annotations

import logging

from frogger.app.exceptions import TerminalError
from frogger.app.ports import Color, Surface
from frogger.domain.game_state import GameState

logger = logging.getLogger(__name__)

FROG_CHAR = "0"
OBSTACLE_CHAR = "#"
BLANK = " "


class Renderer:
    """
    Draws and erases a GameState on a Surface.

    Each terminal command is attempted on its own; a failure is logged and the
    remaining commands still run.
    """

    def __init__(self, surface: Surface) -> None:
        self._surface = surface

    def draw(self, state: GameState) -> None:
        self._put(state.frog.x, state.frog.y, FROG_CHAR, fg=Color.GREEN)
        for o in state.obstacles:
            for x, y in o.cells(state.grid.width):
                self._put(x, y, OBSTACLE_CHAR, fg=Color.WHITE, bg=Color.RED)
        if self._has_status_row(state):
            self._put(0, state.grid.height, self._status_line(state), fg=Color.YELLOW)
        self._refresh()

    def erase(self, state: GameState) -> None:
        self._put(state.frog.x, state.frog.y, BLANK)
        for o in state.obstacles:
            for x, y in o.cells(state.grid.width):
                self._put(x, y, BLANK)

    def _has_status_row(self, state: GameState) -> bool:
        # Short terminals get the grid only, without a warning every tick.
        try:
            _cols, rows = self._surface.size()
        except TerminalError as e:
            logger.warning("size query failed: %s", e)
            return False
        return rows > state.grid.height

    def _status_line(self, state: GameState) -> str:
        text = f"Lives: {state.frog.lives}"
        return text.ljust(state.grid.width)

    def _put(self, x: int, y: int, text: str, *, fg: Color | None = None, bg: Color | None = None) -> None:
        try:
            self._surface.put(x, y, text, fg=fg, bg=bg)
        except TerminalError as e:
            logger.warning("draw at (%d, %d) failed: %s", x, y, e)

    def _refresh(self) -> None:
        try:
            self._surface.refresh()
        except TerminalError as e:
            logger.warning("refresh failed: %s", e)
