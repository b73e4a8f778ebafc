from pathlib import Path
from unittest import mock

import pygame
import pytest

from meowlong.cli import main, validate_file
from meowlong.mapfile import MapError
from meowlong.render import TEXTURE_FILES


def _make_textures(base: Path) -> None:
    for rel in TEXTURE_FILES.values():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface((4, 4))
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(path))


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def valid_map(tmp_path) -> Path:
    path = tmp_path / "level.ber"
    path.write_text("11111\n1PCE1\n11111\n")
    return path


def test_validate_empty_name():
    with pytest.raises(MapError, match="Invalid file name!"):
        validate_file("")


def test_validate_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("1")
    with pytest.raises(MapError, match="Not a .ber file!"):
        validate_file(str(path))


def test_validate_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failed to open map."):
        validate_file(str(tmp_path / "missing.ber"))


def test_validate_accepts_existing_ber(valid_map):
    validate_file(str(valid_map))
    assert valid_map.suffix == ".ber"


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out.startswith("Error\nEnter as follow")


def test_main_not_ber(capsys):
    assert main(["level.txt"]) == 1
    assert capsys.readouterr().out == "Error\nNot a .ber file!\n"


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nNot surrounded by wall!\n"


def test_main_missing_textures(headless, tmp_path, valid_map, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(valid_map)]) == 1
    assert capsys.readouterr().out.startswith("Error\nFailed to load texture")


def test_main_plays_until_quit(headless, tmp_path, valid_map, monkeypatch, capsys):
    _make_textures(tmp_path)
    monkeypatch.chdir(tmp_path)
    with mock.patch("pygame.event.get", side_effect=[[pygame.event.Event(pygame.QUIT)]]):
        status = main([str(valid_map)])
    assert status == 0
    assert capsys.readouterr().out == "Exit game!\n"


def test_main_plays_until_win(headless, tmp_path, valid_map, monkeypatch, capsys):
    _make_textures(tmp_path)
    monkeypatch.chdir(tmp_path)
    right = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d)
    with mock.patch("pygame.event.get", side_effect=[[right], [right]]):
        status = main([str(valid_map)])
    assert status == 0
    assert capsys.readouterr().out == (
        "Number of move: 1\nNumber of move: 2\nYou win!\n"
    )