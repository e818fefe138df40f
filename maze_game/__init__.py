from .maze_level import MazeLevel, Tile
from .actor import Actor, ItemKind, MoveResult
from .level_loader import LevelLoadError, load_levels, parse_levels
from .game import Game

__all__ = ['MazeLevel', 'Tile', 'Actor', 'ItemKind', 'MoveResult', 'LevelLoadError', 'load_levels', 'parse_levels', 'Game']
