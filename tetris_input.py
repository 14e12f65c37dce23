"""Keyboard -> engine command mapping"""
import pygame
from tetris_config import CONFIG

class InputAdapter:
    def __init__(self, game):
        self.game = game
        self.keydown = {
            pygame.K_LEFT: game.move_left,
            pygame.K_RIGHT: game.move_right,
            pygame.K_UP: game.rotate_piece,
            pygame.K_DOWN: lambda: game.set_fast_drop(True),
        }
        self.keyup = {
            pygame.K_DOWN: lambda: game.set_fast_drop(False),
        }

    @staticmethod
    def enable_key_repeat():
        pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])

    def handle(self, e) -> bool:
        """Dispatch one event; returns True if it was a game key."""
        table = {pygame.KEYDOWN: self.keydown, pygame.KEYUP: self.keyup}.get(e.type)
        if table is None or e.key not in table:
            return False
        table[e.key]()
        return True
