"""Loading and validating .ber map files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
VALID_TILES = frozenset(WALL + FLOOR + COLLECTIBLE + EXIT + PLAYER)
MAX_SIZE = 120


class MapError(ValueError):
    """Raised when a map cannot be read or is not a playable map."""


@dataclass(frozen=True, order=True)
class Point:
    """A cell position: column ``x`` and row ``y``."""

    x: int
    y: int

    def neighbours(self) -> Iterator[Point]:
        """Yield the four orthogonally adjacent cells."""
        yield Point(self.x, self.y + 1)
        yield Point(self.x, self.y - 1)
        yield Point(self.x + 1, self.y)
        yield Point(self.x - 1, self.y)


@dataclass(frozen=True)
class GameMap:
    """A validated, rectangular, wall-enclosed map."""

    grid: tuple[str, ...]
    start: Point
    exit: Point
    collectibles: frozenset[Point]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    @property
    def collectible_count(self) -> int:
        return len(self.collectibles)

    def tile(self, point: Point) -> str:
        """Return the character stored at ``point``."""
        if not (0 <= point.y < self.rows and 0 <= point.x < self.cols):
            raise IndexError(f"point {point} is outside the map")
        return self.grid[point.y][point.x]


def parse_map(text: str) -> list[str]:
    """Split map text into its rows."""
    if not text:
        raise MapError("Map is empty!")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    if any(not line for line in lines):
        raise MapError("Not a rectangle map!")
    return lines


def read_map(path: str | PathLike[str]) -> list[str]:
    """Read the rows of the map stored at ``path``."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MapError("Failed to open map!") from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise MapError(exc.strerror or str(exc)) from exc
    return parse_map(data.decode("latin-1"))


def flood_fill(lines: Iterable[str], start: Point) -> frozenset[Point]:
    """Return every non-wall cell reachable from ``start``."""
    grid = list(lines)
    reached: set[Point] = set()
    pending = [start]
    while pending:
        point = pending.pop()
        if point in reached:
            continue
        if not (0 <= point.y < len(grid) and 0 <= point.x < len(grid[point.y])):
            continue
        if grid[point.y][point.x] == WALL:
            continue
        reached.add(point)
        pending.extend(n for n in point.neighbours() if n not in reached)
    return frozenset(reached)


def _check_shape(grid: list[str]) -> None:
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MapError("Not a rectangle map!")
    if len(grid) > MAX_SIZE or width > MAX_SIZE:
        raise MapError("Map parsing: map is too large!")


def _check_walls(grid: list[str]) -> None:
    top, bottom = grid[0], grid[-1]
    if set(top) != {WALL} or set(bottom) != {WALL}:
        raise MapError("Not surrounded by wall!")
    if any(row[0] != WALL or row[-1] != WALL for row in grid):
        raise MapError("Not surrounded by wall!")


def check_map(lines: Iterable[str]) -> GameMap:
    """Validate map rows and return the resulting map."""
    grid = list(lines)
    if not grid:
        raise MapError("Map is empty!")
    _check_shape(grid)
    _check_walls(grid)

    players: list[Point] = []
    exits: list[Point] = []
    collectibles: set[Point] = set()
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char not in VALID_TILES:
                raise MapError("Wrong element(s) in the map!")
            if char == COLLECTIBLE:
                collectibles.add(Point(x, y))
            elif char == EXIT:
                exits.append(Point(x, y))
            elif char == PLAYER:
                players.append(Point(x, y))
    if len(exits) != 1 or len(players) != 1 or not collectibles:
        raise MapError("Invalid number of element(s)!")

    start = players[0]
    reachable = flood_fill(grid, start)
    if not collectibles <= reachable:
        raise MapError("No valid path to all collectibles and exit!")
    if exits[0] not in reachable:
        raise MapError("No or more than one exit!")

    return GameMap(
        grid=tuple(grid),
        start=start,
        exit=exits[0],
        collectibles=frozenset(collectibles),
    )


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map stored at ``path``."""
    return check_map(read_map(path))