from __future__ import annotations
from dataclasses import dataclass

from frogger.domain.grid import Grid
from frogger.domain.rng import RandomSource
from frogger.domain.settings import GameSettings


@dataclass(frozen=True)
class Obstacle:
    """
    A horizontally moving hazard. Coordinates and sizes are in grid cells,
    speed in cells per tick (negative moves left).
    """
    x: int
    y: int
    width: int
    speed: int
    height: int = 1

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width/height must be >= 1")

    def check_speed(self, max_speed: int) -> Obstacle:
        if abs(self.speed) > max_speed:
            raise ValueError(f"speed {self.speed} outside [-{max_speed}, {max_speed}]")
        return self

    def step(self, grid_width: int) -> Obstacle:
        # Python's % is already non-negative for a positive modulus.
        x = (self.x + self.speed) % grid_width
        return Obstacle(x=x, y=self.y, width=self.width, speed=self.speed, height=self.height)

    def overlaps(self, x: int, y: int) -> bool:
        return (x >= self.x and x < self.x + self.width and y >= self.y and y < self.y + self.height)

    def cells(self, grid_width: int) -> list[tuple[int, int]]:
        """Cells the obstacle is drawn on, wrapping past the right edge."""
        return [
            ((self.x + dx) % grid_width, self.y + dy)
            for dy in range(self.height)
            for dx in range(self.width)
        ]


def generate_obstacles(rng: RandomSource, grid: Grid, settings: GameSettings) -> tuple[Obstacle, ...]:
    obstacles: list[Obstacle] = []
    for _ in range(settings.num_obstacles):
        x = rng.randint(0, grid.width - 1)
        # Keep the top and bottom rows clear: the frog spawns on the bottom one.
        y = rng.randint(1, grid.height - 2)
        width = rng.randint(settings.min_obstacle_width, settings.max_obstacle_width)
        speed = rng.randint(-settings.max_speed, settings.max_speed)
        obstacles.append(Obstacle(x=x, y=y, width=width, speed=speed).check_speed(settings.max_speed))
    return tuple(obstacles)
