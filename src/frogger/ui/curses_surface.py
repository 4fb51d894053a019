from __future__ import annotations

import curses

from frogger.app.exceptions import TerminalError
from frogger.app.ports import Color

_CURSES_COLORS = {
    Color.WHITE: curses.COLOR_WHITE,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
}


class CursesSurface:
    """Surface on a curses window. Must be created after curses is initialised."""

    def __init__(self, window: curses.window, *, use_colors: bool | None = None) -> None:
        self._win = window
        self._use_colors = curses.has_colors() if use_colors is None else use_colors
        self._pairs: dict[tuple[Color | None, Color | None], int] = {}

        if self._use_colors:
            try:
                curses.start_color()
                curses.use_default_colors()
            except curses.error:
                # No default colours: fall back to plain text.
                self._use_colors = False

    def put(self, x: int, y: int, text: str, fg: Color | None = None, bg: Color | None = None) -> None:
        try:
            self._win.addstr(y, x, text, self._attr(fg, bg))
        except curses.error as e:
            raise TerminalError(f"addstr({x}, {y}, {text!r}) failed: {e}") from e

    def clear(self) -> None:
        try:
            self._win.clear()
        except curses.error as e:
            raise TerminalError(f"clear failed: {e}") from e

    def hide_cursor(self) -> None:
        self._set_cursor(0)

    def show_cursor(self) -> None:
        self._set_cursor(1)

    def refresh(self) -> None:
        try:
            self._win.refresh()
        except curses.error as e:
            raise TerminalError(f"refresh failed: {e}") from e

    def size(self) -> tuple[int, int]:
        rows, cols = self._win.getmaxyx()
        return cols, rows

    def _set_cursor(self, visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error as e:
            raise TerminalError(f"curs_set({visibility}) failed: {e}") from e

    def _attr(self, fg: Color | None, bg: Color | None) -> int:
        if not self._use_colors or (fg is None and bg is None):
            return curses.A_NORMAL

        key = (fg, bg)
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            try:
                curses.init_pair(
                    pair,
                    _CURSES_COLORS[fg] if fg is not None else -1,
                    _CURSES_COLORS[bg] if bg is not None else -1,
                )
            except curses.error as e:
                raise TerminalError(f"init_pair({pair}) failed: {e}") from e
            self._pairs[key] = pair
        return curses.color_pair(pair)
