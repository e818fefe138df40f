import json
import os

from maze_game.config import *
from maze_game.maze_level import MazeLevel, Tile


_TILE_CODES = {t.value for t in Tile}


class LevelLoadError(Exception):
    """Raised when the level file is missing or does not hold valid levels."""


def levels_path(filename=DEFAULT_LEVELS):
    # Bare file names are looked up in LEVEL_DIR, paths are used as given
    if os.path.dirname(filename):
        return filename
    return os.path.join(LEVEL_DIR, filename)


def parse_levels(data, clock=None):
    """Build MazeLevel objects from already-decoded level data.

    Expected shape: {"levels": [grid, grid, ...]} where each grid is a list of
    equal-length rows of tile codes.
    """
    if not isinstance(data, dict) or "levels" not in data:
        raise LevelLoadError("Level data must be an object with a 'levels' list.")
    grids = data["levels"]
    if not isinstance(grids, list) or not grids:
        raise LevelLoadError("'levels' must be a non-empty list of grids.")

    levels = []
    for i, grid in enumerate(grids):
        _validate_grid(grid, i)
        try:
            levels.append(MazeLevel(grid, clock=clock))
        except ValueError as e:
            raise LevelLoadError(f"levels[{i}]: {e}") from e

        level = levels[-1]
        if level.start is None:
            print(f"Warning: levels[{i}] has no start tile. Using fallback spawn {FALLBACK_SPAWN}.")
            r, c = FALLBACK_SPAWN
            if not level.in_bounds(r, c) or level.is_wall(r, c):
                print(f"Warning: fallback spawn {FALLBACK_SPAWN} is not walkable in levels[{i}]; the player will be stuck.")
    return levels


def _validate_grid(grid, i):
    if not isinstance(grid, list) or not grid:
        raise LevelLoadError(f"levels[{i}] must be a non-empty list of rows.")
    width = None
    for r, row in enumerate(grid):
        if not isinstance(row, list) or not row:
            raise LevelLoadError(f"levels[{i}][{r}] must be a non-empty list of tile codes.")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise LevelLoadError(f"levels[{i}] is not rectangular (row {r} has {len(row)} tiles, expected {width}).")
        for c, value in enumerate(row):
            # bool is an int subclass but never a valid tile code
            if isinstance(value, bool) or not isinstance(value, int) or value not in _TILE_CODES:
                raise LevelLoadError(f"levels[{i}][{r}][{c}] has invalid tile code {value!r}.")


def load_levels(filename=DEFAULT_LEVELS, clock=None):
    filepath = levels_path(filename)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise LevelLoadError(f"Level file not found '{filepath}'") from e
    except UnicodeDecodeError as e:
        raise LevelLoadError(f"Level file '{filepath}' is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise LevelLoadError(f"Could not decode JSON from '{filepath}': {e}") from e
    except OSError as e:
        raise LevelLoadError(f"Could not read '{filepath}': {e}") from e

    levels = parse_levels(data, clock=clock)
    print(f"Levels '{filepath}' loaded successfully ({len(levels)} levels).")
    return levels
