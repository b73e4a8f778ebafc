"""Window, textures and the interactive game loop."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import pygame

from meowlong.game import Direction, Game, MoveOutcome
from meowlong.mapfile import COLLECTIBLE, EXIT, WALL, Point

MAX_PIXEL = 160
RANGE = 16
FRAME_RATE = 60
WINDOW_TITLE = "meowlong"
EXIT_MESSAGE = "Exit game!"
WIN_MESSAGE = "You win!"

TEXTURE_FILES: dict[str, str] = {
    "right": "textures/player/meow-right.png",
    "left": "textures/player/meow-left.png",
    "up": "textures/player/meow-up.png",
    "down": "textures/player/meow-down.png",
    "collectible": "textures/collectible/meal.png",
    "exit_closed": "textures/exit/exit_box_closed.png",
    "exit_open": "textures/exit/exit_box_open.png",
    "space": "textures/space/space-pink.png",
    "wall": "textures/wall/scratcher.png",
}

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _check_dimensions(cols: int, rows: int) -> None:
    if cols < 1 or rows < 1:
        raise ValueError("a map needs at least one row and one column")


def initial_window_size(cols: int, rows: int) -> tuple[int, int]:
    """Return the starting window size for a map of ``cols`` by ``rows``."""
    _check_dimensions(cols, rows)
    pixel = MAX_PIXEL // (max(cols, rows) // RANGE + 1)
    return cols * pixel, rows * pixel


def tile_size(width: int, height: int, cols: int, rows: int) -> int:
    """Return the square tile size that fits the map into the window."""
    _check_dimensions(cols, rows)
    return max(1, min(width // cols, height // rows))


def direction_for_key(key: int) -> Direction | None:
    """Return the direction a key moves the player, or None."""
    return _KEY_DIRECTIONS.get(key)


@dataclass(frozen=True)
class TextureSet:
    """All tile images, scaled to one tile size."""

    players: Mapping[Direction, pygame.Surface]
    collectible: pygame.Surface
    exit_closed: pygame.Surface
    exit_open: pygame.Surface
    space: pygame.Surface
    wall: pygame.Surface
    size: int

    @classmethod
    def load(cls, base_dir: str | PathLike[str], size: int) -> TextureSet:
        """Load every texture below ``base_dir`` and scale it to ``size``."""
        if size < 1:
            raise ValueError("tile size must be at least 1")
        base = Path(base_dir)

        def load_one(name: str) -> pygame.Surface:
            path = base / TEXTURE_FILES[name]
            if not path.is_file():
                raise FileNotFoundError(f"Failed to load texture: {path}")
            image = pygame.image.load(str(path))
            return pygame.transform.scale(image, (size, size))

        return cls(
            players={
                Direction.RIGHT: load_one("right"),
                Direction.LEFT: load_one("left"),
                Direction.UP: load_one("up"),
                Direction.DOWN: load_one("down"),
            },
            collectible=load_one("collectible"),
            exit_closed=load_one("exit_closed"),
            exit_open=load_one("exit_open"),
            space=load_one("space"),
            wall=load_one("wall"),
            size=size,
        )


def _draw(screen: pygame.Surface, game: Game, textures: TextureSet) -> None:
    px = textures.size
    screen.fill((0, 0, 0))
    for y, row in enumerate(game.map.grid):
        for x, char in enumerate(row):
            pos = (x * px, y * px)
            screen.blit(textures.space, pos)
            if char == WALL:
                screen.blit(textures.wall, pos)
            elif char == COLLECTIBLE and not game.is_collected(Point(x, y)):
                screen.blit(textures.collectible, pos)
            elif char == EXIT:
                image = textures.exit_open if game.exit_open() else textures.exit_closed
                screen.blit(image, pos)
    player = textures.players[game.facing]
    screen.blit(player, (game.position.x * px, game.position.y * px))


def run(game: Game, base_dir: str | PathLike[str] = ".") -> str:
    """Play ``game`` in a window until it is won or closed.

    Returns the message to show when the game ends.
    """
    pygame.init()
    try:
        cols, rows = game.map.cols, game.map.rows
        width, height = initial_window_size(cols, rows)
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        textures = TextureSet.load(base_dir, tile_size(width, height, cols, rows))
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return EXIT_MESSAGE
                if event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.get_surface() or screen
                    size = tile_size(event.w, event.h, cols, rows)
                    textures = TextureSet.load(base_dir, size)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return EXIT_MESSAGE
                    direction = direction_for_key(event.key)
                    if direction is None:
                        continue
                    outcome = game.move(direction)
                    if outcome is not MoveOutcome.BLOCKED:
                        print(f"Number of move: {game.moves}")
                    if outcome is MoveOutcome.WON:
                        return WIN_MESSAGE
            _draw(screen, game, textures)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()