"""Dispatch from a board square to the generator for the piece standing there."""

from .board import Board
from .constants import Piece
from .moves import LegalMove
from .pieces import (
    bishop_moves,
    king_moves,
    knight_moves,
    pawn_moves,
    queen_moves,
    rook_moves,
)

_SQUARE_GENERATORS = {
    Piece.WHITE_KNIGHT: knight_moves,
    Piece.BLACK_KNIGHT: knight_moves,
    Piece.WHITE_BISHOP: bishop_moves,
    Piece.BLACK_BISHOP: bishop_moves,
    Piece.WHITE_ROOK: rook_moves,
    Piece.BLACK_ROOK: rook_moves,
    Piece.WHITE_QUEEN: queen_moves,
    Piece.BLACK_QUEEN: queen_moves,
}

_BOARD_GENERATORS = {
    Piece.WHITE_PAWN: pawn_moves,
    Piece.BLACK_PAWN: pawn_moves,
    Piece.WHITE_KING: king_moves,
    Piece.BLACK_KING: king_moves,
}


def moves_from_piece_at(col: int, row: int, board: Board) -> list[LegalMove]:
    """Pseudo-legal moves of the piece at (col, row); empty squares give none."""
    piece = board.squares[row][col]
    if piece in _SQUARE_GENERATORS:
        return _SQUARE_GENERATORS[piece](col, row, piece, board.squares)
    if piece in _BOARD_GENERATORS:
        return _BOARD_GENERATORS[piece](col, row, piece, board)
    return []