"""Game state and player movement rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from meowlong.mapfile import COLLECTIBLE, EXIT, WALL, GameMap, Point


class Direction(enum.Enum):
    """A direction the player can face and move in."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    def step(self, point: Point) -> Point:
        """Return the cell one step from ``point`` in this direction."""
        dx, dy = self.value
        return Point(point.x + dx, point.y + dy)


class MoveOutcome(enum.Enum):
    """What a move attempt led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"


@dataclass
class Game:
    """A running game on a validated map."""

    map: GameMap
    position: Point = field(init=False)
    facing: Direction = field(init=False, default=Direction.DOWN)
    moves: int = field(init=False, default=0)
    collected: set[Point] = field(init=False, default_factory=set)
    won: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.position = self.map.start

    @property
    def taken(self) -> int:
        return len(self.collected)

    def exit_open(self) -> bool:
        """Whether every collectible has been picked up."""
        return self.taken == self.map.collectible_count

    def is_collected(self, point: Point) -> bool:
        """Whether the collectible at ``point`` has been picked up."""
        return point in self.collected

    def move(self, direction: Direction) -> MoveOutcome:
        """Face ``direction`` and try to step that way."""
        if self.won:
            raise RuntimeError("the game is already won")
        self.facing = direction
        target = direction.step(self.position)
        tile = self.map.tile(target)
        if tile == WALL:
            return MoveOutcome.BLOCKED
        self.position = target
        self.moves += 1
        if tile == COLLECTIBLE and target not in self.collected:
            self.collected.add(target)
            return MoveOutcome.COLLECTED
        if tile == EXIT and self.exit_open():
            self.won = True
            return MoveOutcome.WON
        return MoveOutcome.MOVED