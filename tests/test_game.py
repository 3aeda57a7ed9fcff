from pathlib import Path

import pytest

from cubmap.game import PLAYER_NAME, Player, end_message, load_game, main
from cubmap.mapfile import MapError

ROWS = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def texture(tmp_path: Path) -> Path:
    path = tmp_path / "wall.xpm"
    path.write_text("texture")
    return path


def _write(directory: Path, texture: Path, rows=ROWS, name="level.cub") -> Path:
    head = [
        f"NO {texture}",
        f"SO {texture}",
        f"WE {texture}",
        f"EA {texture}",
        "F 220,100,0",
        "C 225,30,0",
    ]
    path = directory / name
    path.write_text("\n".join(head + [""] + list(rows)) + "\n")
    return path


def test_load_game_places_player(tmp_path, texture):
    game = load_game(_write(tmp_path, texture))
    assert game.cub_map.rows == ROWS
    assert ROWS[game.player.y][game.player.x] == "N"
    assert game.player.moves == 0
    assert game.player.direction == "N"
    assert game.player.name == PLAYER_NAME
    assert game.paused is False


def test_load_game_invalid_map(tmp_path, texture):
    with pytest.raises(MapError, match="surrounded by walls"):
        load_game(_write(tmp_path, texture, rows=["111", "1N0", "111"]))


def test_end_message_success():
    player = Player(x=0, y=0, moves=7, name="Alice")
    assert end_message(player, True) == "Congrats Alice! You won in 7 moves !"


def test_end_message_failure():
    player = Player(x=0, y=0, moves=3)
    assert end_message(player, False) == "You have been killed by a ghost (with 3 moves) !"


def test_main_wrong_arguments(capsys):
    assert main([]) == 1
    assert "Error: Wrong number of arguments." in capsys.readouterr().out
    assert main(["a.cub", "b.cub"]) == 1


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Error: Map file not found, or not readable." in capsys.readouterr().out


def test_main_valid_map(tmp_path, texture, capsys):
    assert main([str(_write(tmp_path, texture))]) == 0
    out = capsys.readouterr().out
    assert "Map is valid" in out
    assert f"North texture: {texture}" in out
    assert "Floor texture: 220,100,0" in out
    for row in ROWS:
        assert row in out.splitlines()


def test_main_bad_extension(tmp_path, texture, capsys):
    assert main([str(_write(tmp_path, texture, name="level.txt"))]) == 1
    assert "Error: The extension of the file is not .cub" in capsys.readouterr().out