from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List

import numpy as np

from .grid import rotate


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


# Square bounding boxes so rotation turns around the box center
BASE_SHAPES: Dict[TetrominoType, np.ndarray] = {
    TetrominoType.I: np.array(
        [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]], dtype=np.int8
    ),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 0, 0], [1, 1, 1], [0, 1, 0]], dtype=np.int8),
    TetrominoType.J: np.array([[0, 0, 0], [1, 1, 1], [0, 0, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 0], [1, 1, 1], [1, 0, 0]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 0, 0], [0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[0, 0, 0], [1, 1, 0], [0, 1, 1]], dtype=np.int8),
}

COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#3cc7d6",
    TetrominoType.O: "#fbb414",
    TetrominoType.T: "#b04497",
    TetrominoType.J: "#3993d0",
    TetrominoType.L: "#ed652f",
    TetrominoType.S: "#95c43d",
    TetrominoType.Z: "#e84138",
}


def get_shape(kind: TetrominoType, rotation: int = 0) -> List[List[int]]:
    """Shape grid of ``kind`` after ``rotation`` clockwise quarter turns."""
    shape = BASE_SHAPES[kind].tolist()
    for _ in range(rotation % 4):
        shape = rotate(shape)
    return shape


@dataclass(frozen=True)
class Tetromino:
    kind: TetrominoType
    rotation: int = 0  # 0..3

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    def shape(self) -> List[List[int]]:
        return get_shape(self.kind, self.rotation)

    def rotated(self, delta: int = 1) -> "Tetromino":
        return Tetromino(self.kind, (self.rotation + delta) % 4)
