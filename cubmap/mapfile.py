"""Reading ``.cub`` map files: configuration lines and map rows."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

WHITESPACE = " \t\n\v\f\r"
INSTRUCTION_COUNT = 6

_TEXTURE_KEYS = (("NO", "north"), ("SO", "south"), ("WE", "west"), ("EA", "east"))
_COLOR_KEYS = (("F", "floor"), ("C", "ceiling"))
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class MapError(ValueError):
    """Raised when a map file is missing, unreadable or invalid."""


@dataclass
class Textures:
    """Wall texture paths and floor/ceiling colours named by a map."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: str | None = None
    ceiling: str | None = None


@dataclass
class CubMap:
    """The contents of a map file."""

    path: Path
    name: str
    rows: list[str] = field(default_factory=list)
    textures: Textures = field(default_factory=Textures)

    @property
    def height(self) -> int:
        return len(self.rows)


def is_empty_line(line: str) -> bool:
    """Return True if ``line`` holds only whitespace (or nothing)."""
    return not line.strip(WHITESPACE)


def skip(line: str, char: str) -> int:
    """Return how many leading characters of ``line`` equal ``char``."""
    return len(line) - len(line.lstrip(char))


def open_map_file(path: str | Path) -> IO[str]:
    """Open a map file for reading, raising MapError if that fails."""
    try:
        return open(path, encoding="latin-1")
    except OSError:
        raise MapError("Map file not found, or not readable.") from None


def _lines(handle: IO[str]) -> Iterator[str]:
    for line in handle:
        yield line.removesuffix("\n")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def parse_texture_path(line: str) -> str:
    """Return the texture path of a ``NO``/``SO``/``WE``/``EA`` line.

    The path is the second space-separated word and must name a file
    that can be opened.
    """
    parts = [part for part in line.split(" ") if part]
    if len(parts) < 2:
        raise MapError("Invalid texture path format.")
    path = parts[1]
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise MapError("Texture path is a directory or doesn't exist.") from None
    return path


def parse_color(line: str) -> str:
    """Return the ``R,G,B`` text of an ``F`` or ``C`` line after checking it."""
    _, space, color = line.partition(" ")
    if not space:
        raise MapError("Invalid color format.")
    components = [part for part in color.split(",") if part]
    if len(components) < 3:
        raise MapError("Invalid color format.")
    if any(not 0 <= _atoi(part) <= 255 for part in components[:3]):
        raise MapError("Color value out of range.")
    return color


def _apply_instruction(textures: Textures, line: str) -> None:
    for key, attr in _TEXTURE_KEYS:
        if line.startswith(key):
            setattr(textures, attr, parse_texture_path(line))
            return
    for key, attr in _COLOR_KEYS:
        if line.startswith(key):
            setattr(textures, attr, parse_color(line))
            return
    raise MapError("Invalid map instruction.")


def read_instructions(path: str | Path) -> Textures:
    """Check the first six non-empty lines of a map file as instructions."""
    textures = Textures()
    found = 0
    with open_map_file(path) as handle:
        lines = _lines(handle)
        while found < INSTRUCTION_COUNT:
            line = next(lines, None)
            if line is None:
                raise MapError("Missing map instruction.")
            if is_empty_line(line):
                continue
            _apply_instruction(textures, line)
            found += 1
    return textures


def _config_line(textures: Textures, line: str) -> bool:
    trimmed = line.strip(WHITESPACE)
    for key, attr in _TEXTURE_KEYS + _COLOR_KEYS:
        prefix = key + " "
        if trimmed.startswith(prefix):
            setattr(textures, attr, trimmed[len(prefix):])
            return True
    return False


def read_map(path: str | Path) -> CubMap:
    """Read a map file into its configuration and its map rows.

    Empty lines and configuration lines are left out of the rows.
    """
    path = Path(path)
    cub_map = CubMap(path=path, name=path.name)
    with open_map_file(path) as handle:
        for line in _lines(handle):
            if is_empty_line(line) or _config_line(cub_map.textures, line):
                continue
            cub_map.rows.append(line)
    return cub_map