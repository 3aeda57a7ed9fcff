from pathlib import Path

import pytest

from cubmap.mapfile import MapError, read_map
from cubmap.validate import check_extension, check_line_sizes, check_map, check_walls

ROWS = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def texture(tmp_path: Path) -> Path:
    path = tmp_path / "wall.xpm"
    path.write_text("texture")
    return path


def _write(directory: Path, texture: Path, head=None, rows=ROWS, name="level.cub") -> Path:
    if head is None:
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


@pytest.mark.parametrize("name", ["map.cu", "cub", "map.cub.txt", ""])
def test_check_extension_rejects(name):
    with pytest.raises(MapError, match="The extension of the file is not .cub"):
        check_extension(name)


@pytest.mark.parametrize(
    "rows, message",
    [
        (["101", "101", "111"], r"\(1\)"),
        (["111", "101", "101"], r"\(2\)"),
        (["111", "001", "111"], r"\(3\)"),
        (["111", "   ", "111"], r"\(3\)"),
        (["111", "100", "111"], r"\(4\)"),
        (["111", "1X01", "111"], "non authorized character"),
    ],
)
def test_check_walls_errors(rows, message):
    with pytest.raises(MapError, match=message):
        check_walls(rows)


def test_check_walls_empty():
    with pytest.raises(MapError):
        check_walls([])


def test_check_map_accepts_valid(tmp_path, texture):
    cub_map = read_map(_write(tmp_path, texture))
    check_map(cub_map)
    assert cub_map.textures.north == str(texture)
    assert cub_map.textures.floor == "220,100,0"
    assert cub_map.rows == ROWS


def test_check_map_accepts_ragged_walls(tmp_path, texture):
    rows = ["  1111", "  1001", "111N01", "1000011", "1111111"]
    cub_map = read_map(_write(tmp_path, texture, rows=rows))
    check_map(cub_map)
    assert cub_map.rows == rows


def test_check_map_bad_extension(tmp_path, texture):
    cub_map = read_map(_write(tmp_path, texture, name="level.txt"))
    with pytest.raises(MapError, match="extension"):
        check_map(cub_map)


def test_check_map_missing_texture(tmp_path, texture):
    head = [f"NO {texture}", f"NO {texture}", f"WE {texture}", f"EA {texture}", "F 1,2,3", "C 4,5,6"]
    cub_map = read_map(_write(tmp_path, texture, head=head))
    with pytest.raises(MapError, match="a texture is missing"):
        check_map(cub_map)


def test_check_map_open_wall(tmp_path, texture):
    cub_map = read_map(_write(tmp_path, texture, rows=["111", "100", "111"]))
    with pytest.raises(MapError, match="surrounded by walls"):
        check_map(cub_map)