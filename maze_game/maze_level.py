import math
import numbers
from enum import IntEnum

import numpy as np
import pygame

from maze_game.config import *


class Tile(IntEnum):
    FLOOR = 0
    WALL = 1
    START = 2
    GOAL = 3
    POWER_UP = 4
    COIN = 5


class MazeLevel:
    """One maze grid plus the pickup/timer state of its current activation.

    Times are in milliseconds. Every time-dependent method takes an optional
    ``now``; when it is omitted the level's clock is read instead.
    """

    def __init__(self, grid, clock=None):
        # Object dtype keeps the raw cells, so nothing is coerced before validation
        cells = np.array(grid, dtype=object)
        if cells.ndim != 2 or cells.size == 0:
            raise ValueError("Level grid must be a non-empty rectangular 2D list.")
        for value in cells.flat:
            # bool is an int subclass but never a valid tile code
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
                raise ValueError(f"Tile codes must be integers, got {value!r}.")
        # Copy so the caller's data (e.g. the parsed JSON) is never mutated
        self.grid = cells.astype(np.int64)
        unknown = np.setdiff1d(np.unique(self.grid), [t.value for t in Tile])
        if unknown.size:
            raise ValueError(f"Unknown tile codes in level grid: {unknown.tolist()}")

        self.clock = clock or pygame.time.get_ticks

        # Start position (row, col), or None when the level has no start tile
        self.start = self.find_start()
        # Normalize the start marker(s) to floor after finding it
        self.grid[self.grid == Tile.START] = Tile.FLOOR

        self.collected = set()
        self.level_start_time = self.clock()

    def _now(self, now):
        return self.clock() if now is None else now

    # ----- Size helpers -----

    def rows(self):
        return self.grid.shape[0]

    def cols(self):
        return self.grid.shape[1]

    def dimensions(self):
        return self.rows(), self.cols()

    def pixel_width(self, tile_size=TILE_SIZE):
        return self.cols() * tile_size

    def pixel_height(self, tile_size=TILE_SIZE):
        return self.rows() * tile_size

    def pixel_size(self, tile_size=TILE_SIZE):
        return self.pixel_width(tile_size), self.pixel_height(tile_size)

    # ----- Tile queries -----

    def in_bounds(self, r, c):
        return 0 <= r < self.rows() and 0 <= c < self.cols()

    def tile_at(self, r, c):
        # No clamping, and negative indices must not wrap around like numpy's
        if not self.in_bounds(r, c):
            raise IndexError(f"Tile ({r}, {c}) is outside the {self.rows()}x{self.cols()} grid.")
        return Tile(int(self.grid[r, c]))

    def is_wall(self, r, c):
        return self.tile_at(r, c) == Tile.WALL

    def is_goal(self, r, c):
        return self.tile_at(r, c) == Tile.GOAL

    def is_power_up(self, r, c):
        return self.tile_at(r, c) == Tile.POWER_UP

    def is_coin(self, r, c):
        return self.tile_at(r, c) == Tile.COIN

    # ----- Pickups and timer -----

    def is_collected(self, r, c):
        return (r, c) in self.collected

    def collect_item(self, r, c):
        self.collected.add((r, c))

    def coins_available(self, now=None):
        """Purple coins can only be picked up during the first COIN_DURATION ms."""
        return self._now(now) - self.level_start_time < COIN_DURATION

    def coin_time_remaining(self, now=None):
        """Whole seconds left in the coin window (rounded up, never negative)."""
        remaining = max(0, COIN_DURATION - (self._now(now) - self.level_start_time))
        return math.ceil(remaining / 1000)

    def reset_timer(self, now=None):
        """Start a fresh activation: new coin window, nothing collected."""
        self.level_start_time = self._now(now)
        self.collected = set()

    def find_start(self):
        # argwhere yields cells in row-major order
        starts = np.argwhere(self.grid == Tile.START)
        if len(starts) == 0:
            return None
        r, c = starts[0]
        return int(r), int(c)

    # ----- Drawing -----

    def draw(self, screen, tile_size=TILE_SIZE, font=None, now=None):
        now = self._now(now)
        coins_visible = self.coins_available(now)
        ts = tile_size

        for r in range(self.rows()):
            for c in range(self.cols()):
                tile = self.tile_at(r, c)
                rect = pygame.Rect(c * ts, r * ts, ts, ts)
                center = rect.center

                # Base tile (floor or wall)
                pygame.draw.rect(screen, WALL_COLOR if tile == Tile.WALL else FLOOR_COLOR, rect)

                if tile == Tile.GOAL:
                    highlight = pygame.Surface((ts - 8, ts - 8), pygame.SRCALPHA)
                    pygame.draw.rect(highlight, GOAL_COLOR, highlight.get_rect(), border_radius=6)
                    screen.blit(highlight, (rect.x + 4, rect.y + 4))

                elif tile == Tile.POWER_UP and not self.is_collected(r, c):
                    pygame.draw.circle(screen, POWER_UP_COLOR, center, ts * 0.25)
                    pygame.draw.circle(screen, POWER_UP_SPARKLE, center, ts * 0.125)

                elif tile == Tile.COIN and coins_visible and not self.is_collected(r, c):
                    pygame.draw.circle(screen, COIN_COLOR, center, ts * 0.2)
                    pygame.draw.circle(screen, COIN_CENTER, center, ts * 0.075)

        if font is not None:
            self.draw_coin_timer(screen, font, tile_size, now)

    def draw_coin_timer(self, screen, font, tile_size=TILE_SIZE, now=None):
        """Show how long purple coins are still available."""
        if not self.coins_available(now):
            return
        seconds = self.coin_time_remaining(now)
        timer_text = font.render(f"Purple coins: {seconds}s", True, COIN_CENTER)
        timer_rect = timer_text.get_rect(bottomleft=(10, self.pixel_height(tile_size) - 6))
        screen.blit(timer_text, timer_rect)
