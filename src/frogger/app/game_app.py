from __future__ import annotations

import logging
import random

from frogger.app.game_loop import GameLoop
from frogger.app.ports import InputSource, Surface
from frogger.domain.game_state import GameState, new_game
from frogger.domain.rng import RandomSource
from frogger.domain.settings import GameSettings
from frogger.domain.world import World

logger = logging.getLogger(__name__)


class FroggerApp:
    """Wires settings, a fresh game state and the loop onto given collaborators."""

    def __init__(
        self,
        *,
        surface: Surface,
        input_source: InputSource,
        settings: GameSettings | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()
        self.world = World()

        self.state = new_game(self.rng, self.settings)

        self.loop = GameLoop(
            surface=surface,
            input_source=input_source,
            world=self.world,
            tick_seconds=self.settings.tick_seconds,
        )

    def run(self) -> GameState:
        logger.info(
            "starting game: %dx%d grid, %d obstacles, difficulty=%s",
            self.settings.width,
            self.settings.height,
            len(self.state.obstacles),
            self.settings.difficulty,
        )
        self.state = self.loop.run(self.state)
        logger.info("game stopped with %d lives left", self.state.frog.lives)
        return self.state
