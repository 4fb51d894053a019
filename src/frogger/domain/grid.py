from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def spawn_point(self) -> tuple[int, int]:
        # Horizontal midpoint, bottom row.
        return self.width // 2, self.height - 1
