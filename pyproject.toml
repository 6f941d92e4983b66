[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacgame"
version = "0.1.0"
description = "Game logic for a Pac-Man style arcade game: maze, ghosts, pellets, fruit and a simple AI"
requires-python = ">=3.10"
dependencies = []
keywords = ["pacman", "arcade", "game", "ghosts", "maze"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pacgame"]

[tool.pytest.ini_options]
addopts = "-ra"
