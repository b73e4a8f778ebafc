"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from meowlong.game import Game
from meowlong.mapfile import MapError, load_map
from meowlong.render import run

USAGE = "Enter as follow: meowlong <MAP_PATH>"


def validate_file(name: str) -> None:
    """Check that ``name`` is a readable .ber file."""
    if not name:
        raise MapError("Invalid file name!")
    if not name.endswith(".ber"):
        raise MapError("Not a .ber file!")
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError("Failed to open map.") from exc


def _error(message: str) -> int:
    print(f"Error\n{message}")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error(USAGE)
    path = args[0]
    try:
        validate_file(path)
        game_map = load_map(path)
    except MapError as exc:
        return _error(str(exc))
    try:
        message = run(Game(game_map))
    except (OSError, pygame.error) as exc:
        return _error(str(exc))
    print(message)
    return 0