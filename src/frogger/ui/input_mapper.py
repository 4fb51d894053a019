from __future__ import annotations

import curses

from frogger.domain.command import Command

KEY_BINDINGS: dict[int, Command] = {
    curses.KEY_UP: Command.UP,
    ord("w"): Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    ord("s"): Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    ord("a"): Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    ord("d"): Command.RIGHT,
    ord("q"): Command.QUIT,
}


class CursesInputMapper:
    def __init__(self, window: curses.window) -> None:
        self._win = window
        # Arrow keys arrive as single KEY_* codes instead of escape sequences.
        self._win.keypad(True)
        # One blocking read per tick.
        self._win.nodelay(False)

    def read(self) -> Command:
        try:
            code = self._win.getch()
        except curses.error:
            return Command.NONE
        # Resize, mouse and unbound keys all fall through to NONE.
        return KEY_BINDINGS.get(code, Command.NONE)
