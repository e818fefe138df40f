import json
import os
from pathlib import Path

import pytest

from maze_game.config import DEFAULT_LEVELS, LEVEL_DIR
from maze_game.level_loader import LevelLoadError, levels_path, load_levels, parse_levels
from maze_game.maze_level import Tile

SHIPPED_LEVELS = Path(LEVEL_DIR) / DEFAULT_LEVELS


def write_levels(tmp_path: Path, payload) -> Path:
    path = tmp_path / "levels.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_levels_from_path(tmp_path: Path) -> None:
    path = write_levels(tmp_path, {"levels": [[[2, 0], [1, 3]], [[2, 0, 3]]]})
    levels = load_levels(str(path), clock=lambda: 0)
    assert len(levels) == 2
    assert levels[0].dimensions() == (2, 2)
    assert levels[1].dimensions() == (1, 3)
    assert levels[0].start == (0, 0)


def test_levels_path_uses_level_dir_for_bare_names() -> None:
    assert levels_path("extra.json") == os.path.join(LEVEL_DIR, "extra.json")
    assert levels_path("some/where.json") == "some/where.json"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError, match="not found"):
        load_levels(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "levels.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(LevelLoadError, match="decode"):
        load_levels(str(path))


def test_invalid_utf8_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "levels.json"
    path.write_bytes(b'{"levels": [[[2, 3]]], "x": "\xff\xfe"}')
    with pytest.raises(LevelLoadError, match="UTF-8"):
        load_levels(str(path))


@pytest.mark.parametrize("payload", [
    [],
    {},
    {"levels": []},
    {"levels": "x"},
    {"levels": [[]]},
    {"levels": [[[0, 1], [0]]]},
    {"levels": [[[0, 7]]]},
    {"levels": [[[0, True]]]},
    {"levels": [[[0, 1.0]]]},
    {"levels": [[0, 1]]},
])
def test_malformed_level_data_is_rejected(payload) -> None:
    with pytest.raises(LevelLoadError):
        parse_levels(payload)


def test_level_without_start_warns(capsys) -> None:
    parse_levels({"levels": [[[0, 0, 0], [0, 0, 3]]]}, clock=lambda: 0)
    out = capsys.readouterr().out
    assert "no start tile" in out
    assert "stuck" not in out


def test_unwalkable_fallback_spawn_warns(capsys) -> None:
    parse_levels({"levels": [[[0, 3]]]}, clock=lambda: 0)
    out = capsys.readouterr().out
    assert "stuck" in out


def test_shipped_levels_load_from_any_directory(tmp_path: Path, monkeypatch) -> None:
    assert SHIPPED_LEVELS.is_file()
    monkeypatch.chdir(tmp_path)
    levels = load_levels(clock=lambda: 0)
    assert len(levels) >= 1
    for level in levels:
        assert level.start is not None
        assert not level.is_wall(*level.start)
        tiles = {level.tile_at(r, c) for r in range(level.rows()) for c in range(level.cols())}
        assert Tile.GOAL in tiles
        assert Tile.START not in tiles
