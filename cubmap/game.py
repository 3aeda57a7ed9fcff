"""Loading a game from a map file, and the command that does it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from cubmap.mapfile import CubMap, MapError, read_map
from cubmap.validate import check_map

PLAYER_NAME = "Player"
_SPAWNS = frozenset("NSEW")


@dataclass
class Player:
    """The player's position, move count and facing."""

    x: int
    y: int
    moves: int = 0
    direction: str = "N"
    name: str = PLAYER_NAME


@dataclass
class Game:
    """A loaded map together with its player."""

    cub_map: CubMap
    player: Player
    paused: bool = False


def _spawn(rows: Sequence[str]) -> tuple[int, int]:
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in _SPAWNS:
                return x, y
    return 0, 0


def load_game(path: str | os.PathLike[str]) -> Game:
    """Read and validate a map file and place the player on it."""
    cub_map = read_map(path)
    check_map(cub_map)
    x, y = _spawn(cub_map.rows)
    return Game(cub_map=cub_map, player=Player(x=x, y=y))


def end_message(player: Player, success: bool) -> str:
    """Return the message shown when a game is won or lost."""
    if success:
        return f"Congrats {player.name}! You won in {player.moves} moves !"
    return f"You have been killed by a ghost (with {player.moves} moves) !"


def _report(game: Game) -> None:
    for row in game.cub_map.rows:
        print(row)
    textures = game.cub_map.textures
    print(f"\nNorth texture: {textures.north}")
    print(f"South texture: {textures.south}")
    print(f"West texture: {textures.west}")
    print(f"East texture: {textures.east}")
    print(f"Floor texture: {textures.floor}")
    print(f"Ceiling texture: {textures.ceiling}")
    print("\nMap is valid")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and report on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise MapError("Wrong number of arguments.")
        path = args[0]
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            raise MapError("Map file not found, or not readable.")
        game = load_game(path)
    except MapError as exc:
        print(f"Error: {exc}")
        return 1
    _report(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())