"""Piece model, shapes, rotation"""
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple

from tetris_config import COLS
from tetris_rng import PieceRandom

Matrix = List[List[int]]

SHAPES = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

SPAWN_X, SPAWN_Y = COLS // 2 - 1, 0

def rotate(m: Matrix) -> Matrix: return [list(r) for r in zip(*m[::-1])]

@dataclass(frozen=True)
class Piece:
    t: str
    shape: Matrix
    x: int
    y: int

    @staticmethod
    def spawn(t: str) -> "Piece":
        return Piece(t, [r[:] for r in SHAPES[t]], SPAWN_X, SPAWN_Y)

    @property
    def width(self) -> int: return len(self.shape[0])

    @property
    def height(self) -> int: return len(self.shape)

    def at(self, x: int, y: int) -> "Piece":
        return replace(self, x=x, y=y)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x+dx, y=self.y+dy)

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate(self.shape))

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Absolute (x, y) of every filled cell, including rows above the board."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

def random_piece(rng: Optional[PieceRandom] = None) -> Piece:
    return Piece.spawn((rng or PieceRandom()).next_piece())
