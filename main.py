import argparse
import logging
import sys
from typing import Optional

import pygame
from tetris_config import CONFIG
from tetris_engine import Game
from tetris_input import InputAdapter
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandom
from tetris_timer import DropTimer

logger = logging.getLogger(__name__)


def setup_logger(level: str = 'INFO'):
    log_format = '%(asctime)s %(levelname)s <%(name)s.%(funcName)s> %(message)s'
    logging.basicConfig(level=level.upper(), format=log_format)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(seed: Optional[int] = None):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = Game(PieceRandom(seed))
    controls = InputAdapter(game)
    controls.enable_key_repeat()
    timer = DropTimer()

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                logger.info('Window closed')
                pygame.quit(); return
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r and game.game_over:
                game.restart()
                continue
            controls.handle(e)

        # Period follows level / fast drop / game over; a change restarts the schedule
        timer.drive(game, pygame.time.get_ticks())

        render.draw(screen, game.snapshot())
        pygame.display.flip()


def main(argv=None):
    parser = argparse.ArgumentParser(prog='tetris')
    parser.add_argument('--log_level', default='INFO')
    parser.add_argument('--seed', type=int, default=CONFIG["SEED"],
                        help='seed for a reproducible piece sequence')
    parser.add_argument('--cell_size', type=int, default=CONFIG["CELL_SIZE"])
    args = parser.parse_args(argv)
    if args.cell_size < 8:
        parser.error('--cell_size must be at least 8')
    CONFIG["CELL_SIZE"] = args.cell_size

    setup_logger(args.log_level)
    run(args.seed)


if __name__ == '__main__':
    sys.exit(main())
