from __future__ import annotations
from dataclasses import dataclass

from frogger.domain.grid import Grid


@dataclass(frozen=True)
class Frog:
    """
    The player token. Moves saturate at the grid edges instead of wrapping,
    so every method here is total: an impossible move returns the same frog.
    """
    x: int
    y: int
    lives: int

    @classmethod
    def spawn(cls, grid: Grid, lives: int) -> Frog:
        x, y = grid.spawn_point
        return cls(x=x, y=y, lives=lives)

    def move_up(self, grid: Grid) -> Frog:
        if self.y > 0:
            return Frog(x=self.x, y=self.y - 1, lives=self.lives)
        return self

    def move_down(self, grid: Grid) -> Frog:
        if self.y < grid.height - 1:
            return Frog(x=self.x, y=self.y + 1, lives=self.lives)
        return self

    def move_left(self, grid: Grid) -> Frog:
        if self.x > 0:
            return Frog(x=self.x - 1, y=self.y, lives=self.lives)
        return self

    def move_right(self, grid: Grid) -> Frog:
        if self.x < grid.width - 1:
            return Frog(x=self.x + 1, y=self.y, lives=self.lives)
        return self

    def hit(self, grid: Grid) -> Frog:
        """Lose a life (never below zero) and go back to the spawn point."""
        x, y = grid.spawn_point
        return Frog(x=x, y=y, lives=max(0, self.lives - 1))
