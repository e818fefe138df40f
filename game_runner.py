# game_runner.py
import argparse
import sys

from maze_game import Game, LevelLoadError, load_levels
from maze_game.config import DEFAULT_LEVELS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the maze game.")
    parser.add_argument(
        "--levels",
        default=DEFAULT_LEVELS,
        help="Level file: a bare file name is looked up in the game's levels directory, anything else is used as a path.",
    )
    args = parser.parse_args(argv)

    # A broken level file must stop us before the window and loop ever start
    try:
        levels = load_levels(args.levels)
    except LevelLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    game = Game(levels)
    game.run()
    return 0


# --- Main Execution ---
if __name__ == "__main__":
    sys.exit(main())
