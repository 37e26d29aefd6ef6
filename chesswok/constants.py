"""Board geometry, piece codes and team helpers."""

from enum import IntEnum

BOARD_SIZE = 8

TILE_SIZE = 100
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
CREAM_TILE_COLOR = (238, 238, 210)
GREEN_TILE_COLOR = (118, 150, 86)

WHITE = -1
BLACK = 1
PLAYING_PLAYER = WHITE


class Piece(IntEnum):
    """Numeric codes stored in the board's squares."""

    EMPTY = 0

    WHITE_PAWN = 7
    WHITE_KNIGHT = 8
    WHITE_BISHOP = 9
    WHITE_ROOK = 10
    WHITE_KING = 11
    WHITE_QUEEN = 12

    BLACK_PAWN = 13
    BLACK_KNIGHT = 14
    BLACK_BISHOP = 15
    BLACK_ROOK = 16
    BLACK_KING = 17
    BLACK_QUEEN = 18


EMPTY = Piece.EMPTY

KING_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, 1), (0, -1), (1, 1), (1, 0), (1, -1))
KNIGHT_OFFSETS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
BISHOP_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_OFFSETS = ((0, -1), (-1, 0), (0, 1), (1, 0))

NO_TILE_SELECTED = (-1, -1)


def get_team(piece: int) -> int:
    """Return WHITE or BLACK for a non-empty piece code."""
    if piece == EMPTY:
        raise ValueError("An empty was passed into a get team")
    return WHITE if piece < Piece.BLACK_PAWN else BLACK


def in_bounds(index: int) -> bool:
    """Whether a row or column index lies on the board."""
    return 0 <= index < BOARD_SIZE