"""Game logic for a Pac-Man style arcade game: maze, ghosts, pellets, fruit, scoring and a simple AI."""

__version__ = "0.1.0"