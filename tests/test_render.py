import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
from tetris_config import CONFIG, ROWS  # noqa: E402
from tetris_engine import Game  # noqa: E402
from tetris_layout import compute_dims  # noqa: E402
from tetris_piece import Piece  # noqa: E402
from tetris_render import COLORS, LOCKED, RenderAssets  # noqa: E402
from tetris_rng import PieceRandom  # noqa: E402


class TestLayout(unittest.TestCase):
    def test_dims(self):
        d = compute_dims()
        c = CONFIG["CELL_SIZE"]
        self.assertEqual(10 * c, d.board_w)
        self.assertEqual(ROWS * c, d.board_h)
        self.assertGreater(d.preview_x, d.panel_x)
        self.assertLessEqual(d.preview_x + 4 * c, d.panel_x + d.panel_w)


class TestRenderAssets(unittest.TestCase):
    def setUp(self):
        pygame.font.init()
        self.dims = compute_dims()
        self.render = RenderAssets(self.dims, pygame.font.Font(None, 20))
        self.screen = pygame.Surface((self.dims.total_w, self.dims.total_h))
        self.game = Game(PieceRandom(0))
        self.game.current = Piece.spawn("O")
        self.game.next = Piece.spawn("I")

    def center(self, bx, by):
        x, y = self.render.cell_pos(bx, by)
        return x + self.dims.cell // 2, y + self.dims.cell // 2

    def color_at(self, bx, by):
        return tuple(self.screen.get_at(self.center(bx, by)))[:3]

    def test_draws_locked_and_current(self):
        self.game.board[ROWS - 1][0] = 1
        self.render.draw(self.screen, self.game.snapshot())
        self.assertEqual(LOCKED, self.color_at(0, ROWS - 1))
        self.assertEqual(COLORS["O"], self.color_at(4, 0))
        self.assertNotEqual(LOCKED, self.color_at(1, ROWS - 1))

    def test_board_cache_follows_new_board(self):
        self.render.draw(self.screen, self.game.snapshot())
        self.game.board = [r[:] for r in self.game.board]
        self.game.board[ROWS - 1][9] = 1
        self.render.draw(self.screen, self.game.snapshot())
        self.assertEqual(LOCKED, self.color_at(9, ROWS - 1))

    def test_game_over_frame(self):
        self.game.game_over = True
        self.render.draw(self.screen, self.game.snapshot())
        self.assertEqual("I", self.render.hud.next_type)

    def test_no_ghost_once_game_is_over(self):
        self.render.draw(self.screen, self.game.snapshot())
        self.assertNotEqual(self.color_at(0, ROWS - 1), self.color_at(4, ROWS - 1))
        self.game.game_over = True
        self.render.draw(self.screen, self.game.snapshot())
        self.assertEqual(self.color_at(0, ROWS - 1), self.color_at(4, ROWS - 1))


if __name__ == '__main__':
    unittest.main()
