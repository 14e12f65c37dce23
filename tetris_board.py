"""Board helpers: collide, merge, clear, ghost"""
from typing import List, Tuple
from tetris_config import COLS, ROWS
from tetris_piece import Piece

Board = List[List[int]]

def empty_board() -> Board:
    return [[0] * COLS for _ in range(ROWS)]

def collide(board: Board, piece: Piece) -> bool:
    for bx, by in piece.cells():
        if bx<0 or bx>=COLS or by>=ROWS: return True
        if by>=0 and board[by][bx]: return True
    return False

def merge(board: Board, piece: Piece) -> Board:
    """Return a copy of board with the piece locked in (no collision check)."""
    new = [r[:] for r in board]
    for bx, by in piece.cells():
        if by>=0: new[by][bx]=1
    return new

def clear_lines(board: Board) -> Tuple[Board, int]:
    remaining = [r[:] for r in board if not all(r)]
    c = ROWS - len(remaining)
    return [[0] * COLS for _ in range(c)] + remaining, c

def ghost_piece(piece: Piece, board: Board) -> Piece:
    """Where the piece would land if dropped straight down."""
    g = piece
    while not collide(board, g.moved(0, 1)):
        g = g.moved(0, 1)
    return g

def board_to_str(board: Board) -> str:
    return "\n".join("".join("#" if v else "." for v in r) for r in board)
