"""Tests for the terminal scope guard."""

import pytest

from frogger.app.exceptions import TerminalError
from frogger.app.terminal_session import TerminalSession


class TestTerminalSession:
    def test_enter_and_exit(self, surface):
        """Entering hides the cursor, leaving clears and shows it again."""
        with TerminalSession(surface) as s:
            assert s is surface
            assert not surface.cursor_visible
            surface.put(1, 1, "x")
        assert surface.cursor_visible
        assert surface.cells == {}

    def test_restores_on_exception(self, surface):
        """The terminal is restored when the block raises."""
        with pytest.raises(KeyboardInterrupt):
            with TerminalSession(surface):
                raise KeyboardInterrupt
        assert surface.cursor_visible

    def test_enter_failure_propagates(self, make_surface):
        """Failing to clear the screen on entry is fatal."""
        surface = make_surface(fail_on={"clear"})
        with pytest.raises(TerminalError):
            with TerminalSession(surface):
                pytest.fail("block must not run")

    def test_exit_failure_does_not_mask_block_error(self, make_surface):
        """The block's own exception wins over a failing restore."""
        surface = make_surface()
        with pytest.raises(ValueError):
            with TerminalSession(surface):
                surface.fail_on.add("clear")
                raise ValueError("inner")
        assert surface.cursor_visible
