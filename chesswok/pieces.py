"""Pseudo-legal move generation for each kind of piece."""

from collections.abc import Iterable, Sequence

from .attacks import is_square_under_attack
from .board import Board
from .constants import (
    BISHOP_OFFSETS,
    BLACK,
    EMPTY,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    NO_TILE_SELECTED,
    ROOK_OFFSETS,
    WHITE,
    Piece,
    get_team,
    in_bounds,
)
from .moves import LegalMove

Squares = Sequence[Sequence[int]]

_KING_START_COL = 4
# (rook column, squares that must be empty, squares that must be safe, king target)
_CASTLES = (
    (7, (5, 6), (4, 5, 6), 6),
    (0, (1, 2, 3), (2, 3, 4), 2),
)


def _sliding_moves(
    col: int,
    row: int,
    piece: int,
    squares: Squares,
    offsets: Iterable[tuple[int, int]],
) -> list[LegalMove]:
    color = get_team(piece)
    origin = (col, row)
    moves = []
    for d_col, d_row in offsets:
        c, r = col + d_col, row + d_row
        while in_bounds(c) and in_bounds(r):
            occupant = squares[r][c]
            if occupant != EMPTY and get_team(occupant) == color:
                break
            moves.append(LegalMove((c, r), origin, piece, occupant))
            if occupant != EMPTY:
                break
            c += d_col
            r += d_row
    return moves


def _step_moves(
    col: int,
    row: int,
    piece: int,
    squares: Squares,
    offsets: Iterable[tuple[int, int]],
) -> list[LegalMove]:
    color = get_team(piece)
    origin = (col, row)
    moves = []
    for d_col, d_row in offsets:
        c, r = col + d_col, row + d_row
        if not (in_bounds(c) and in_bounds(r)):
            continue
        occupant = squares[r][c]
        if occupant == EMPTY or get_team(occupant) != color:
            moves.append(LegalMove((c, r), origin, piece, occupant))
    return moves


def bishop_moves(col: int, row: int, piece: int, squares: Squares) -> list[LegalMove]:
    """Diagonal slides, stopping before own pieces and on captures."""
    return _sliding_moves(col, row, piece, squares, BISHOP_OFFSETS)


def rook_moves(col: int, row: int, piece: int, squares: Squares) -> list[LegalMove]:
    """Orthogonal slides, stopping before own pieces and on captures."""
    return _sliding_moves(col, row, piece, squares, ROOK_OFFSETS)


def queen_moves(col: int, row: int, piece: int, squares: Squares) -> list[LegalMove]:
    """Rook moves followed by bishop moves from the same square."""
    return rook_moves(col, row, piece, squares) + bishop_moves(col, row, piece, squares)


def knight_moves(col: int, row: int, piece: int, squares: Squares) -> list[LegalMove]:
    """Knight jumps onto empty or enemy squares."""
    return _step_moves(col, row, piece, squares, KNIGHT_OFFSETS)


def _castling_moves(board: Board, col: int, row: int, piece: int, color: int) -> list[LegalMove]:
    home_row = 7 if color == WHITE else 0
    if board.has_moved(col, row) or (col, row) != (_KING_START_COL, home_row):
        return []
    squares = board.squares
    moves = []
    for rook_col, between, passage, target_col in _CASTLES:
        if board.has_moved(rook_col, row):
            continue
        if any(squares[row][c] != EMPTY for c in between):
            continue
        if any(is_square_under_attack(c, row, color, squares) for c in passage):
            continue
        moves.append(
            LegalMove(
                (target_col, home_row),
                (col, row),
                piece,
                EMPTY,
                is_castle=True,
                additional_piece_has_moved=False,
            )
        )
    return moves


def king_moves(col: int, row: int, piece: int, board: Board) -> list[LegalMove]:
    """Castling moves (short first, then long) followed by single steps."""
    color = get_team(piece)
    castles = _castling_moves(board, col, row, piece, color)
    return castles + _step_moves(col, row, piece, board.squares, KING_OFFSETS)


def pawn_moves(col: int, row: int, piece: int, board: Board) -> list[LegalMove]:
    """En passant, forward steps and the double step, then diagonal captures."""
    color = get_team(piece)
    squares = board.squares
    origin = (col, row)
    promotion_row = 0 if color == WHITE else 7
    opposite_pawn = Piece.BLACK_PAWN if piece == Piece.WHITE_PAWN else Piece.WHITE_PAWN
    moves = []

    last = board.last_move
    if last.from_ != NO_TILE_SELECTED and last.piece_to_move == opposite_pawn:
        new_col, new_row = last.to
        _, old_row = last.from_
        if abs(new_row - old_row) == 2 and new_row == row and abs(new_col - col) == 1:
            target_row = new_row + color
            moves.append(
                LegalMove(
                    (new_col, target_row),
                    origin,
                    piece,
                    squares[target_row][new_col],
                    is_en_passant=True,
                    additional_piece_has_moved=True,
                )
            )

    ahead = row + color
    if not in_bounds(ahead):
        return moves

    def step(target_col: int) -> LegalMove:
        return LegalMove(
            (target_col, ahead),
            origin,
            piece,
            squares[ahead][target_col],
            is_promotion=ahead == promotion_row,
        )

    if squares[ahead][col] == EMPTY:
        moves.append(step(col))
        start_row = 6 if color == WHITE else 1
        jump = row + 2 * color
        if row == start_row and squares[jump][col] == EMPTY and not board.has_moved(col, row):
            moves.append(LegalMove((col, jump), origin, piece, squares[jump][col]))

    for target_col in (col + 1, col - 1):
        if not in_bounds(target_col):
            continue
        occupant = squares[ahead][target_col]
        if occupant != EMPTY and get_team(occupant) != color:
            moves.append(step(target_col))
    return moves


__all__ = [
    "BLACK",
    "bishop_moves",
    "king_moves",
    "knight_moves",
    "pawn_moves",
    "queen_moves",
    "rook_moves",
]