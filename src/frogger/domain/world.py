from __future__ import annotations

import logging

from frogger.domain.command import Command
from frogger.domain.exceptions import QuitRequested
from frogger.domain.frog import Frog
from frogger.domain.game_state import GameState
from frogger.domain.grid import Grid
from frogger.domain.obstacle import Obstacle

logger = logging.getLogger(__name__)


class World:
    def step(self, state: GameState, command: Command) -> GameState:
        # ----- Quit wins over everything else this tick -----
        if command is Command.QUIT:
            raise QuitRequested()

        grid = state.grid

        # ----- Frog move -----
        frog = self._apply_move(state.frog, command, grid)

        # ----- Obstacles -----
        obstacles = tuple(o.step(grid.width) for o in state.obstacles)

        # ----- Collision: at most one hit per tick -----
        if self._frog_hits_any_obstacle(frog, obstacles):
            frog = frog.hit(grid)
            logger.debug("frog hit, %d lives left", frog.lives)

        return GameState(grid=grid, frog=frog, obstacles=obstacles)

    def _apply_move(self, frog: Frog, command: Command, grid: Grid) -> Frog:
        if command is Command.UP:
            return frog.move_up(grid)
        if command is Command.DOWN:
            return frog.move_down(grid)
        if command is Command.LEFT:
            return frog.move_left(grid)
        if command is Command.RIGHT:
            return frog.move_right(grid)
        return frog

    def _frog_hits_any_obstacle(self, frog: Frog, obstacles: tuple[Obstacle, ...]) -> bool:
        for o in obstacles:
            if o.overlaps(frog.x, frog.y):
                return True
        return False
