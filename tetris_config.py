COLS, ROWS = 10, 20

# Auto-drop timing (ms)
NORMAL_DROP_MS = 500
FAST_DROP_MS = 30
LEVEL_SPEEDUP_MS = 50
MIN_DROP_MS = 100

LINES_PER_LEVEL = 10
SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}

CONFIG = {
    "CELL_SIZE": 30,
    "FPS": 60,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
}
