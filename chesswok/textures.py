"""Loading of the piece images from an asset directory."""

from pathlib import Path

import pygame

from .constants import Piece

PIECE_NAMES = (
    "whitePawn",
    "whiteKnight",
    "whiteBishop",
    "whiteRook",
    "whiteKing",
    "whiteQueen",
    "blackPawn",
    "blackKnight",
    "blackBishop",
    "blackRook",
    "blackKing",
    "blackQueen",
)

_FIRST_PIECE = Piece.WHITE_PAWN


class TextureManager:
    """Piece images read from ``<asset_dir>/<name>.png`` and looked up by piece code."""

    def __init__(self, asset_dir="assets") -> None:
        self.asset_dir = Path(asset_dir)
        self._textures: dict[str, pygame.Surface] = {}

    def load(self) -> None:
        """Read every piece image; a missing file raises FileNotFoundError."""
        for name in PIECE_NAMES:
            path = self.asset_dir / f"{name}.png"
            if not path.is_file():
                raise FileNotFoundError(f"missing piece image: {path}")
            self._textures[name] = pygame.image.load(str(path))

    def texture(self, piece: int) -> pygame.Surface:
        """The image for a piece code."""
        index = piece - _FIRST_PIECE
        if not 0 <= index < len(PIECE_NAMES):
            raise ValueError(f"no texture for piece code {int(piece)}")
        name = PIECE_NAMES[index]
        try:
            return self._textures[name]
        except KeyError:
            raise LookupError(f"texture {name!r} has not been loaded") from None