from __future__ import annotations

import logging
import time
from collections.abc import Callable

from frogger.app.ports import InputSource, Surface
from frogger.app.renderer import Renderer
from frogger.app.terminal_session import TerminalSession
from frogger.domain.exceptions import QuitRequested
from frogger.domain.game_state import GameState
from frogger.domain.world import World

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Fixed-tick, single-threaded loop: render, one blocking read, erase, step,
    then sleep to the next tick boundary. Runs until the player quits.
    """

    def __init__(
        self,
        *,
        surface: Surface,
        input_source: InputSource,
        world: World | None = None,
        tick_seconds: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._surface = surface
        self._input = input_source
        self._world = world or World()
        self._renderer = Renderer(surface)
        self._tick_seconds = tick_seconds
        self._clock = clock
        self._sleep = sleep

        self._running = False
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def run(self, state: GameState) -> GameState:
        """Play from `state` until quit; returns the last state."""
        with TerminalSession(self._surface):
            self._running = True
            try:
                next_tick = self._clock()
                while self._running:
                    state = self._tick(state)
                    if not self._running:
                        break
                    next_tick += self._tick_seconds
                    # Blocked on input past the boundary: rebase instead of
                    # running a burst of catch-up ticks.
                    now = self._clock()
                    if next_tick <= now:
                        next_tick = now + self._tick_seconds
                    self._sleep_until(next_tick)
            finally:
                self._running = False
        return state

    def stop(self) -> None:
        self._running = False

    def _tick(self, state: GameState) -> GameState:
        self.ticks += 1
        self._renderer.draw(state)

        command = self._input.read()

        self._renderer.erase(state)
        try:
            return self._world.step(state, command)
        except QuitRequested:
            logger.info("quit after %d ticks", self.ticks)
            self.stop()
            return state

    def _sleep_until(self, deadline: float) -> None:
        remaining = deadline - self._clock()
        if remaining > 0:
            self._sleep(remaining)
