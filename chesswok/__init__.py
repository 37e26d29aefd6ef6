"""A two-player chess board with pseudo-legal move generation and a pygame front end."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "attacks",
    "board",
    "constants",
    "drawer",
    "interactor",
    "movegen",
    "moves",
    "pieces",
    "textures",
]