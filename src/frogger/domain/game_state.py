from __future__ import annotations
from dataclasses import dataclass

from frogger.domain.frog import Frog
from frogger.domain.grid import Grid
from frogger.domain.obstacle import Obstacle, generate_obstacles
from frogger.domain.rng import RandomSource
from frogger.domain.settings import GameSettings


@dataclass(frozen=True)
class GameState:
    grid: Grid
    frog: Frog
    obstacles: tuple[Obstacle, ...]

    def __post_init__(self) -> None:
        if not self.grid.contains(self.frog.x, self.frog.y):
            raise ValueError(f"frog at ({self.frog.x}, {self.frog.y}) is off the grid")
        for o in self.obstacles:
            # Only rows need checking in full: x wraps, so the leading cell is enough.
            if not (self.grid.contains(o.x, o.y) and self.grid.contains(o.x, o.y + o.height - 1)):
                raise ValueError(f"obstacle at ({o.x}, {o.y}) is off the grid")


def new_game(rng: RandomSource, settings: GameSettings) -> GameState:
    grid = Grid(width=settings.width, height=settings.height)
    return GameState(
        grid=grid,
        frog=Frog.spawn(grid, settings.max_lives),
        obstacles=generate_obstacles(rng, grid, settings),
    )
