from __future__ import annotations

from dataclasses import dataclass

from .game.grid import WellGrid, generate_empty_grid


@dataclass
class WellConfig:
    """Dimensions of the well for a game session"""
    rows: int = 20
    cols: int = 10

    def __post_init__(self) -> None:
        self.rows = int(self.rows)
        self.cols = int(self.cols)
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"well must be at least 1x1, got {self.rows}x{self.cols}")

    def new_grid(self) -> WellGrid:
        return generate_empty_grid(self.rows, self.cols)
