"""Game engine: session state, commands, gravity tick"""
import logging
from dataclasses import dataclass
from typing import Optional

from tetris_board import Board, board_to_str, clear_lines, collide, empty_board, ghost_piece, merge
from tetris_config import (FAST_DROP_MS, LEVEL_SPEEDUP_MS, LINES_PER_LEVEL, MIN_DROP_MS,
                           NORMAL_DROP_MS, SCORE_TABLE)
from tetris_piece import Piece, SPAWN_X, SPAWN_Y, random_piece
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def drop_interval_ms(level: int, fast: bool = False) -> int:
    if fast:
        return FAST_DROP_MS
    return max(MIN_DROP_MS, NORMAL_DROP_MS - (level - 1) * LEVEL_SPEEDUP_MS)


@dataclass(frozen=True)
class GameView:
    """Everything the renderer needs for one frame."""
    board: Board
    current: Piece
    ghost: Piece
    next: Piece
    score: int
    lines: int
    level: int
    game_over: bool


class Game:
    def __init__(self, rng: Optional[PieceRandom] = None):
        self.rng = rng or PieceRandom()
        self.restart()

    def restart(self):
        self.board: Board = empty_board()
        self.current = random_piece(self.rng)
        self.next = random_piece(self.rng)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.fast_drop = False
        self.game_over = False
        logger.info('New game (seed=%s), first piece %s', self.rng.seed, self.current.t)

    # ---------- Commands ----------
    def _try(self, piece: Piece) -> bool:
        if self.game_over or collide(self.board, piece):
            return False
        self.current = piece
        return True

    def move_left(self) -> bool:
        return self._try(self.current.moved(-1, 0))

    def move_right(self) -> bool:
        return self._try(self.current.moved(1, 0))

    def rotate_piece(self) -> bool:
        # Plain rotation at the same anchor, refused on collision
        return self._try(self.current.rotated())

    def set_fast_drop(self, fast: bool) -> bool:
        if self.game_over or self.fast_drop == fast:
            return False
        self.fast_drop = fast
        return True

    def tick(self) -> bool:
        """Gravity step. Moves the piece down one row or locks it."""
        if self.game_over:
            return False
        if self._try(self.current.moved(0, 1)):
            return True
        self._lock()
        return True

    def _lock(self):
        merged = merge(self.board, self.current)
        self.board, cleared = clear_lines(merged)
        logger.debug('Locked %s at (%d, %d), cleared %d',
                     self.current.t, self.current.x, self.current.y, cleared)
        if cleared:
            self.score += SCORE_TABLE.get(cleared, 0) * self.level
            self.lines += cleared
            level = level_for_lines(self.lines)
            if level != self.level:
                logger.info('Level %d -> %d (lines %d)', self.level, level, self.lines)
                self.level = level

        self.current = self.next.at(SPAWN_X, SPAWN_Y)
        self.next = random_piece(self.rng)
        if collide(self.board, self.current):
            self.game_over = True
            logger.info('Game over: score %d, lines %d, level %d',
                        self.score, self.lines, self.level)
            logger.debug('Final board:\n%s', board_to_str(self.board))

    # ---------- Queries ----------
    def drop_interval(self) -> Optional[int]:
        """Auto-drop period in ms, None once the game is over."""
        if self.game_over:
            return None
        return drop_interval_ms(self.level, self.fast_drop)

    def ghost(self) -> Piece:
        return ghost_piece(self.current, self.board)

    def snapshot(self) -> GameView:
        return GameView(self.board, self.current, self.ghost(), self.next,
                        self.score, self.lines, self.level, self.game_over)
