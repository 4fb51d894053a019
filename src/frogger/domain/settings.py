from __future__ import annotations
from dataclasses import dataclass

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class GameSettings:
    """
    Fixed game parameters. Sizes are in grid cells, speeds in cells per tick.

    `difficulty` is carried for the CLI but no parameter depends on it yet.
    """
    width: int = 20
    height: int = 10
    max_lives: int = 3
    num_obstacles: int = 5
    min_obstacle_width: int = 1
    max_obstacle_width: int = 3
    max_speed: int = 2
    tick_seconds: float = 0.1
    difficulty: str = "medium"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width/height must be > 0")
        # Obstacles live on interior rows only, so we need at least one.
        if self.height < 3:
            raise ValueError("height must leave at least one interior row")
        if self.max_lives < 0:
            raise ValueError("max_lives must be >= 0")
        if self.num_obstacles < 0:
            raise ValueError("num_obstacles must be >= 0")
        if not 1 <= self.min_obstacle_width <= self.max_obstacle_width:
            raise ValueError("obstacle widths must satisfy 1 <= min <= max")
        if self.max_speed < 0:
            raise ValueError("max_speed must be >= 0")
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be > 0")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {self.difficulty!r}")
