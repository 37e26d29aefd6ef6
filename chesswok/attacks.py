"""Detection of squares attacked by the opposing side."""

from collections.abc import Iterable, Sequence

from .constants import (
    BISHOP_OFFSETS,
    EMPTY,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_OFFSETS,
    WHITE,
    Piece,
    get_team,
    in_bounds,
)

Squares = Sequence[Sequence[int]]


def _enemy(color: int, white_piece: Piece, black_piece: Piece) -> Piece:
    return black_piece if color == WHITE else white_piece


def _sliding_attack(
    color: int,
    col: int,
    row: int,
    squares: Squares,
    offsets: Iterable[tuple[int, int]],
    attackers: set[int],
) -> bool:
    for d_col, d_row in offsets:
        c, r = col + d_col, row + d_row
        while in_bounds(c) and in_bounds(r):
            occupant = squares[r][c]
            if occupant != EMPTY:
                if get_team(occupant) != color and occupant in attackers:
                    return True
                break
            c += d_col
            r += d_row
    return False


def _step_attack(
    col: int,
    row: int,
    squares: Squares,
    offsets: Iterable[tuple[int, int]],
    attacker: int,
) -> bool:
    return any(
        in_bounds(col + d_col)
        and in_bounds(row + d_row)
        and squares[row + d_row][col + d_col] == attacker
        for d_col, d_row in offsets
    )


def _pawn_attack(color: int, col: int, row: int, squares: Squares) -> bool:
    enemy_pawn = _enemy(color, Piece.WHITE_PAWN, Piece.BLACK_PAWN)
    pawn_row = row + color
    if not in_bounds(pawn_row):
        return False
    return any(
        in_bounds(c) and squares[pawn_row][c] == enemy_pawn for c in (col - 1, col + 1)
    )


def is_square_under_attack(col: int, row: int, color: int, squares: Squares) -> bool:
    """Whether the side opposing ``color`` attacks (col, row); squares is indexed [row][col]."""
    enemy_queen = _enemy(color, Piece.WHITE_QUEEN, Piece.BLACK_QUEEN)
    enemy_bishop = _enemy(color, Piece.WHITE_BISHOP, Piece.BLACK_BISHOP)
    enemy_rook = _enemy(color, Piece.WHITE_ROOK, Piece.BLACK_ROOK)
    return (
        _step_attack(col, row, squares, KNIGHT_OFFSETS,
                     _enemy(color, Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT))
        or _sliding_attack(color, col, row, squares, BISHOP_OFFSETS,
                           {enemy_bishop, enemy_queen})
        or _sliding_attack(color, col, row, squares, ROOK_OFFSETS,
                           {enemy_rook, enemy_queen})
        or _pawn_attack(color, col, row, squares)
        or _step_attack(col, row, squares, KING_OFFSETS,
                        _enemy(color, Piece.WHITE_KING, Piece.BLACK_KING))
    )