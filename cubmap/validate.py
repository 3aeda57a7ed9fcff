"""Validation of a map read from a ``.cub`` file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields

from cubmap.mapfile import CubMap, MapError, read_instructions, skip

_EDGE = frozenset("1 ")
_INSIDE = frozenset("10NSEW ")


def check_extension(name: str) -> None:
    """Raise MapError unless ``name`` ends in ``.cub``."""
    if len(name) < 4 or not name.endswith(".cub"):
        raise MapError("The extension of the file is not .cub")


def _check_middle_rows(rows: Sequence[str]) -> None:
    for row in rows[1:-1]:
        start = skip(row, " ")
        if start >= len(row) or row[start] != "1":
            raise MapError("Map is not surrounded by walls. (3)")
        if any(char not in _INSIDE for char in row[start:-1]):
            raise MapError("Map contains non authorized character (2).")
        if row[-1] != "1":
            raise MapError("Map is not surrounded by walls. (4)")


def check_walls(rows: Sequence[str]) -> None:
    """Check that the first, last and every middle row is closed by walls."""
    if not rows:
        raise MapError("Map is empty.")
    first = rows[0]
    if any(char not in _EDGE for char in first[skip(first, " "):]):
        raise MapError("Map is not surrounded by walls. (1)")
    if any(char not in _EDGE for char in rows[-1]):
        raise MapError("Map is not surrounded by walls. (2)")
    _check_middle_rows(rows)


def check_line_sizes(rows: Sequence[str]) -> None:
    """Check that where rows differ in length the overhang is wall or space."""
    for previous, current in zip(rows, rows[1:]):
        if len(current) > len(previous):
            overhang = current[len(previous):]
        else:
            overhang = previous[len(current):]
        if any(char not in _EDGE for char in overhang):
            raise MapError("Map is invalid. Inconsistent wall structure.")


def check_map(cub_map: CubMap) -> None:
    """Validate a map, replacing its textures with the checked instructions."""
    check_extension(cub_map.name)
    textures = read_instructions(cub_map.path)
    cub_map.textures = textures
    if any(getattr(textures, item.name) is None for item in fields(textures)):
        raise MapError("Map is invalid, a texture is missing.")
    check_walls(cub_map.rows)
    check_line_sizes(cub_map.rows)