"""Uniform piece randomizer"""
import random
from typing import Optional

class PieceRandom:
    PIECES = ["I","O","T","S","Z","J","L"]
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_piece(self) -> str:
        return self._random.choice(self.PIECES)
