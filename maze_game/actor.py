from enum import Enum
from typing import NamedTuple, Optional

import pygame

from maze_game.config import *


class ItemKind(Enum):
    POWER_UP = "powerup"
    COIN = "coin"


class MoveResult(NamedTuple):
    moved: bool
    item: Optional[ItemKind] = None


class Actor:
    """The player token: a grid position, a move throttle and the glow status.

    The actor never keeps a reference to a level; the active level is passed
    in to every call that needs one.
    """

    def __init__(self, move_delay=MOVE_DELAY, glow_duration=GLOW_DURATION, clock=None):
        self.clock = clock or pygame.time.get_ticks

        # Current grid position
        self.row = 0
        self.col = 0

        # Movement throttle (so a held key doesn't move 60 tiles per second)
        self.move_delay = move_delay
        self.last_move_time = None  # None until the first accepted move

        # Glow effect
        self.glowing = False
        self.glow_start_time = 0
        self.glow_duration = glow_duration

    def _now(self, now):
        return self.clock() if now is None else now

    @property
    def cell(self):
        return self.row, self.col

    def set_cell(self, r, c):
        """Place the actor without any move validation (level entry)."""
        self.row = r
        self.col = c

    # Convert grid coords to the pixel center of the cell
    def pixel_x(self, tile_size=TILE_SIZE):
        return self.col * tile_size + tile_size // 2

    def pixel_y(self, tile_size=TILE_SIZE):
        return self.row * tile_size + tile_size // 2

    # ----- Glow -----

    def activate_glow(self, now=None):
        self.glowing = True
        self.glow_start_time = self._now(now)

    def clear_glow(self):
        self.glowing = False

    def update_glow_status(self, level, now=None):
        """Turn the glow off once it has run out or the actor stands on the goal of `level`."""
        if not self.glowing:
            return
        if self._now(now) - self.glow_start_time > self.glow_duration:
            self.glowing = False
        elif level.in_bounds(self.row, self.col) and level.is_goal(self.row, self.col):
            self.glowing = False

    # ----- Movement -----

    def attempt_move(self, level, dr, dc, now=None):
        """Try to move by (dr, dc) tiles on `level`.

        Returns a MoveResult telling whether the move happened and which item,
        if any, was picked up on the destination cell. Rejected moves leave
        the actor untouched.
        """
        now = self._now(now)
        if self.last_move_time is not None and now - self.last_move_time < self.move_delay:
            return MoveResult(False)

        nr = self.row + dr
        nc = self.col + dc

        # Prevent walking off the map or into walls
        if not level.in_bounds(nr, nc):
            return MoveResult(False)
        if level.is_wall(nr, nc):
            return MoveResult(False)

        # Movement is allowed, so commit
        self.row = nr
        self.col = nc
        self.last_move_time = now

        # A cell holds a single tile code, so at most one branch can match
        item = None
        if level.is_power_up(nr, nc) and not level.is_collected(nr, nc):
            level.collect_item(nr, nc)
            self.activate_glow(now)
            item = ItemKind.POWER_UP
        elif level.is_coin(nr, nc) and not level.is_collected(nr, nc) and level.coins_available(now):
            level.collect_item(nr, nc)
            item = ItemKind.COIN

        return MoveResult(True, item)

    # ----- Drawing -----

    def draw(self, screen, tile_size=TILE_SIZE):
        center = (self.pixel_x(tile_size), self.pixel_y(tile_size))

        # Glow goes first so it sits behind the player
        if self.glowing:
            size = int(tile_size * GLOW_LAYERS[0][0])
            glow = pygame.Surface((size, size), pygame.SRCALPHA)
            for scale, color in GLOW_LAYERS:
                pygame.draw.circle(glow, color, (size // 2, size // 2), tile_size * scale / 2)
            screen.blit(glow, glow.get_rect(center=center))

        pygame.draw.circle(screen, PLAYER_COLOR, center, tile_size * 0.3)
        pygame.draw.circle(screen, WHITE, center, tile_size * 0.1)
