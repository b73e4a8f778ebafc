[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meowlong"
version = "1.0.0"
description = "A small tile-based puzzle game: guide the cat to every meal, then to the open box."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "pygame", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meowlong = "meowlong.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["meowlong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
