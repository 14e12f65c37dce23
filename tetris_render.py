"""
Rendering helpers for the game window.

- Pre-render the static background (grid + panel frame) once per Dims.
- Pre-render block cell Surfaces (solid per piece type, locked, ghost) and blit them.
- Cache a BOARD SURFACE with all locked blocks; rebuild it only when the engine
  hands over a new board (boards are replaced on lock, never edited in place).
- Cache HUD text surfaces; re-render only when values change.

Nothing here writes to engine state.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_config import COLS, ROWS
from tetris_layout import Dims
from tetris_board import Board
from tetris_engine import GameView
from tetris_piece import Piece

# Colors per tetromino type (falling and preview pieces)
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
# The board keeps occupancy only, so locked cells share one color
LOCKED = (77,109,79)
GHOST = (180,238,126,64)
EDGE = (255,255,255)
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_type: str = ""
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_src: Optional[Board] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17,24,39))
        grid_col = (40,50,70)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        frame = pygame.Rect(d.board_x-2, d.board_y-2, d.board_w+4, d.board_h+4)
        pygame.draw.rect(self.bg, (34,211,238), frame, 2)
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        pv = pygame.Rect(d.preview_x-1, d.preview_y-1, d.cell*4+2, d.cell*4+2)
        pygame.draw.rect(self.bg, (90,95,110), pv, 1)
        self.bg.blit(self.font.render("NEXT", True, (103,232,249)), (d.panel_x + 12, d.panel_y + 16))

    # ---------- Cell sprites ----------
    def _block(self, col) -> pygame.Surface:
        c = self.dims.cell
        s = pygame.Surface((c, c), pygame.SRCALPHA)
        s.fill(col)
        pygame.draw.rect(s, EDGE, (0,0,c,c), 1)
        return s

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {t: self._block(col) for t, col in COLORS.items()}
        self.locked_surf = self._block(LOCKED)
        c = self.dims.cell
        g = pygame.Surface((c, c), pygame.SRCALPHA)
        g.fill(GHOST)
        pygame.draw.rect(g, (255,255,255,102), (0,0,c,c), 1)
        self.ghost_surf = g

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the locked-blocks surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                if board[y][x]:
                    self.board_surface.blit(self.locked_surf, (x*c, y*c))
        self._board_src = board

    # ---------- Pieces ----------
    def draw_piece(self, screen: pygame.Surface, piece: Piece, surf: pygame.Surface):
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(surf, self.cell_pos(bx, by))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, view: GameView):
        d = self.dims
        f = self.font
        if view.score != self.hud.score:
            self.hud.score = view.score
            self.hud.score_s = f.render(f"Score: {view.score}", True, TEXT)
        if view.level != self.hud.level:
            self.hud.level = view.level
            self.hud.level_s = f.render(f"Level: {view.level}", True, TEXT)
        if view.lines != self.hud.lines:
            self.hud.lines = view.lines
            self.hud.lines_s = f.render(f"Lines: {view.lines}", True, TEXT)
        if view.next.t != self.hud.next_type:
            self.hud.next_type = view.next.t
            s = pygame.Surface((d.cell*4, d.cell*4), pygame.SRCALPHA)
            offx = (4 - view.next.width) // 2
            offy = (4 - view.next.height) // 2
            for x, y in view.next.at(offx, offy).cells():
                s.blit(self.cell_surf[view.next.t], (x*d.cell, y*d.cell))
            self.hud.next_s = s
        screen.blit(self.hud.next_s, (d.preview_x, d.preview_y))
        y = d.preview_y + d.cell*4 + 24
        for surf in (self.hud.score_s, self.hud.lines_s, self.hud.level_s):
            screen.blit(surf, (d.panel_x + 12, y)); y += 24

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0,0,0,150))
        screen.blit(shade, (d.board_x, d.board_y))
        msg = self.big_font.render("GAME OVER", True, (248,113,113))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2)))
        hint = self.font.render("R to Restart", True, TEXT)
        screen.blit(hint, hint.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2 + 32)))

    def draw(self, screen: pygame.Surface, view: GameView):
        """Full frame: background, locked cells, ghost, current piece, HUD."""
        if view.board is not self._board_src:
            self.rebuild_board_surface(view.board)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if not view.game_over:
            self.draw_piece(screen, view.ghost, self.ghost_surf)
        self.draw_piece(screen, view.current, self.cell_surf[view.current.t])
        self.draw_panel_hud(screen, view)
        if view.game_over:
            self.draw_game_over(screen)
