# Configuration file for the maze game
import os

import pygame

# Window / loop
FPS = 60
WINDOW_TITLE = "Maze Run"
KEY_REPEAT_DELAY = 200  # ms before a held key starts repeating
KEY_REPEAT_INTERVAL = 50  # ms between repeats (the move delay still applies)

# Grid
TILE_SIZE = 32
FALLBACK_SPAWN = (1, 1)  # (row, col) used when a level has no start tile

# Timing (milliseconds)
MOVE_DELAY = 90
GLOW_DURATION = 5000
COIN_DURATION = 15000

# Scoring
COIN_POINTS = 100

# Level files (shipped inside the package)
LEVEL_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "levels")
DEFAULT_LEVELS = "levels.json"

# Colors
WHITE = (255, 255, 255)
BACKGROUND = (240, 240, 240)
WALL_COLOR = (30, 50, 60)      # Dark teal
FLOOR_COLOR = (232, 232, 232)  # Light gray
GOAL_COLOR = (255, 200, 120, 200)
POWER_UP_COLOR = (255, 105, 180)  # Hot pink
POWER_UP_SPARKLE = (255, 200, 220)
COIN_COLOR = (138, 43, 226)    # Purple
COIN_CENTER = (225, 194, 255)
PLAYER_COLOR = (20, 120, 255)
GLOW_LAYERS = (  # (diameter as a fraction of the tile, rgba), outermost first
    (1.5, (255, 105, 180, 50)),
    (1.2, (255, 105, 180, 100)),
    (0.9, (255, 182, 193, 150)),
)
HUD_COLOR = (225, 225, 225)
HUD_GLOW_COLOR = (255, 105, 180)
HUD_FONT_SIZE = 16
TIMER_FONT_SIZE = 16

# Controls: key -> (dr, dc)
KEY_DIRECTIONS = {
    pygame.K_LEFT: (0, -1),
    pygame.K_a: (0, -1),
    pygame.K_RIGHT: (0, 1),
    pygame.K_d: (0, 1),
    pygame.K_UP: (-1, 0),
    pygame.K_w: (-1, 0),
    pygame.K_DOWN: (1, 0),
    pygame.K_s: (1, 0),
}
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)
