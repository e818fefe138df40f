import os

# Run pygame headless; must be set before any window is opened
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture
def quit_pygame():
    yield
    pygame.quit()
