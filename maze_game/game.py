import pygame

from maze_game.actor import Actor, ItemKind
from maze_game.config import *


class Game:
    """Owns the level list, the active level index, the actor and the score.

    Input handling and level transitions are the only paths that mutate this
    state; drawing only reads it.
    """

    def __init__(self, levels, tile_size=TILE_SIZE):
        if not levels:
            raise ValueError("Game needs at least one level.")

        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, HUD_FONT_SIZE)
        self.timer_font = pygame.font.SysFont(None, TIMER_FONT_SIZE)
        self.running = True

        self.levels = levels
        self.tile_size = tile_size
        self.level_index = 0
        self.actor = Actor()
        self.score = 0
        self.screen = None

        self.load_level(0)

    @property
    def level(self):
        return self.levels[self.level_index]

    # ----- Level switching -----

    def load_level(self, index, now=None):
        """Make levels[index] active: fresh timer/pickups, actor on the start, window resized."""
        now = pygame.time.get_ticks() if now is None else now
        self.level_index = index
        level = self.level

        # Glow never carries over into another level (or a revisit)
        self.actor.clear_glow()
        level.reset_timer(now)

        if level.start is not None:
            self.actor.set_cell(*level.start)
        else:
            self.actor.set_cell(*FALLBACK_SPAWN)

        # Match the window to this level's dimensions
        self.screen = pygame.display.set_mode(level.pixel_size(self.tile_size))

    def next_level(self, now=None):
        # Wrap around after the last level
        self.load_level((self.level_index + 1) % len(self.levels), now)

    # ----- Input -----

    def move(self, dr, dc, now=None):
        """Move the actor on the active level and apply the consequences."""
        now = pygame.time.get_ticks() if now is None else now
        result = self.actor.attempt_move(self.level, dr, dc, now)
        if not result.moved:
            return result

        if result.item is ItemKind.POWER_UP:
            print("Collected power-up! Player is now glowing!")
        elif result.item is ItemKind.COIN:
            self.score += COIN_POINTS
            print(f"Collected coin! +{COIN_POINTS} points! Score: {self.score}")

        if self.level.is_goal(self.actor.row, self.actor.col):
            self.next_level(now)
            print(f"Level {self.level_index + 1}/{len(self.levels)}")
        return result

    def handle_key(self, key, now=None):
        if key in QUIT_KEYS:
            self.running = False
            return None
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return None  # not a movement key
        return self.move(*direction, now=now)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    # ----- Drawing -----

    def draw_hud(self):
        level_text = self.font.render(f"Level {self.level_index + 1}/{len(self.levels)}", True, HUD_COLOR)
        self.screen.blit(level_text, (10, 6))

        score_text = self.font.render(f"Score: {self.score}", True, HUD_COLOR)
        self.screen.blit(score_text, (10, 6 + level_text.get_height()))

        if self.actor.glowing:
            glow_text = self.font.render("You are Glowing! (Literally)", True, HUD_GLOW_COLOR)
            glow_rect = glow_text.get_rect(topright=(self.screen.get_width() - 10, 6))
            self.screen.blit(glow_text, glow_rect)

    def draw(self, now=None):
        now = pygame.time.get_ticks() if now is None else now
        self.screen.fill(BACKGROUND)

        # Level first, then the player on top
        self.level.draw(self.screen, self.tile_size, self.timer_font, now)
        self.actor.update_glow_status(self.level, now)
        self.actor.draw(self.screen, self.tile_size)

        self.draw_hud()
        pygame.display.flip()

    def run(self):
        try:
            while self.running:
                self.clock.tick(FPS)
                self.handle_input()
                if self.running:
                    self.draw()
        finally:
            pygame.quit()
