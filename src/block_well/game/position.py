from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


Number = Union[int, float]


@dataclass(frozen=True)
class Position:
    """Top-left corner of a piece grid over the well.

    Coordinates are floats while a piece falls: gravity adds a fraction of a
    row every frame. Any grid operation works on the floored cell.
    """

    x: Number
    y: Number


def get_exact_position(position: Position) -> Position:
    return Position(x=math.floor(position.x), y=math.floor(position.y))
