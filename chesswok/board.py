"""Board state: piece placement, move history and per-side position tracking."""

from collections.abc import Callable
from typing import Optional

from .constants import (
    BLACK,
    BOARD_SIZE,
    EMPTY,
    NO_TILE_SELECTED,
    WHITE,
    Piece,
    get_team,
)
from .moves import LegalMove, Square

PromotionChooser = Callable[[int], int]

_BACK_RANK = (
    "ROOK", "KNIGHT", "BISHOP", "QUEEN", "KING", "BISHOP", "KNIGHT", "ROOK",
)

_LONG_CASTLE_KING_COL = 2
_SHORT_CASTLE_KING_COL = 6


def _back_rank(prefix: str) -> list[int]:
    return [Piece[f"{prefix}_{name}"] for name in _BACK_RANK]


def _initial_positions(back_row: int, pawn_row: int) -> list[Square]:
    cols = range(BOARD_SIZE - 1, -1, -1)
    return [(col, back_row) for col in cols] + [(col, pawn_row) for col in cols]


class Board:
    """An 8x8 board; ``squares`` is indexed [row][col], row 0 being black's back rank."""

    def __init__(self) -> None:
        self.last_move = LegalMove(NO_TILE_SELECTED, NO_TILE_SELECTED, EMPTY, EMPTY)
        self.white_positions: list[Square] = _initial_positions(7, 6)
        self.black_positions: list[Square] = _initial_positions(0, 1)
        self._moved = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        empty_row = [EMPTY] * BOARD_SIZE
        self.squares: list[list[int]] = [
            _back_rank("BLACK"),
            [Piece.BLACK_PAWN] * BOARD_SIZE,
            *(list(empty_row) for _ in range(4)),
            [Piece.WHITE_PAWN] * BOARD_SIZE,
            _back_rank("WHITE"),
        ]

    def has_moved(self, col: int, row: int) -> bool:
        """Whether a piece has ever left or arrived at (col, row)."""
        return self._moved[row][col]

    def _positions(self, color: int) -> list[Square]:
        return self.black_positions if color == BLACK else self.white_positions

    def remove_position(self, color: int, col: int, row: int) -> None:
        """Drop (col, row) from the tracker of ``color``."""
        positions = self._positions(color)
        positions[:] = [pos for pos in positions if pos != (col, row)]

    def add_position(self, color: int, col: int, row: int) -> None:
        """Record (col, row) in the tracker of ``color``."""
        self._positions(color).append((col, row))

    def update_known_positions(self, move: LegalMove) -> None:
        """Update both trackers for the mover's step and any capture on the target."""
        color = get_team(move.piece_to_move)
        to_col, to_row = move.to
        from_col, from_row = move.from_
        self.remove_position(-color, to_col, to_row)
        self.remove_position(color, from_col, from_row)
        self.add_position(color, to_col, to_row)

    def do_move(
        self, move: LegalMove, choose_promotion: Optional[PromotionChooser] = None
    ) -> None:
        """Apply ``move``; ``choose_promotion(color)`` picks a promotion piece if given."""
        old_col, old_row = move.from_
        new_col, new_row = move.to
        color = get_team(move.piece_to_move)

        self.update_known_positions(move)

        self.squares[old_row][old_col] = EMPTY
        self.squares[new_row][new_col] = move.piece_to_move

        if move.is_en_passant:
            captured_row = new_row - color
            self.squares[captured_row][new_col] = EMPTY
            self.remove_position(-color, new_col, captured_row)

        if move.is_castle:
            if new_col == _LONG_CASTLE_KING_COL:
                self._move_rook(color, new_row, 0, 3)
            elif new_col == _SHORT_CASTLE_KING_COL:
                self._move_rook(color, new_row, 7, 5)

        self.last_move = move
        self._moved[old_row][old_col] = True
        self._moved[new_row][new_col] = True

        promotion_row = 0 if color == WHITE else 7
        is_pawn = move.piece_to_move in (Piece.WHITE_PAWN, Piece.BLACK_PAWN)
        if is_pawn and new_row == promotion_row:
            if choose_promotion is not None:
                move.promotion_piece = choose_promotion(color)
            self.handle_promotion(move)

    def _move_rook(self, color: int, row: int, from_col: int, to_col: int) -> None:
        self.squares[row][to_col] = self.squares[row][from_col]
        self.squares[row][from_col] = EMPTY
        self._moved[row][from_col] = True
        self.remove_position(color, from_col, row)
        self.add_position(color, to_col, row)

    def handle_promotion(self, move: LegalMove) -> None:
        """Replace the pawn on the target square, defaulting to a queen."""
        color = get_team(move.piece_to_move)
        col, row = move.to
        if move.promotion_piece == EMPTY:
            move.promotion_piece = Piece.WHITE_QUEEN if color == WHITE else Piece.BLACK_QUEEN
        self.squares[row][col] = move.promotion_piece

    def _tracker_grid(self) -> list[list[int]]:
        grid = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for col, row in self.white_positions:
            grid[row][col] = 1
        for col, row in self.black_positions:
            grid[row][col] = 2
        return grid

    def tracker_mismatches(self) -> list[tuple[int, int, int, int]]:
        """Squares where trackers and pieces disagree, as (col, row, tracker, squares).

        Codes are 0 for empty, 1 for white and 2 for black.
        """
        grid = self._tracker_grid()
        mismatches = []
        for row, (tracked_row, piece_row) in enumerate(zip(grid, self.squares)):
            for col, (tracked, piece) in enumerate(zip(tracked_row, piece_row)):
                if piece == EMPTY:
                    expected = 0
                else:
                    expected = 1 if get_team(piece) == WHITE else 2
                if tracked != expected:
                    mismatches.append((col, row, tracked, expected))
        return mismatches

    def format_tracker(self) -> str:
        """Render the trackers as a grid, rank 8 at the bottom as stored rows go."""
        grid = self._tracker_grid()
        lines = ["", "   a b c d e f g h", "  -----------------"]
        for row in reversed(range(BOARD_SIZE)):
            cells = "".join(f"{value} " for value in grid[row])
            lines.append(f"{row + 1}| {cells}")
        lines.append("  -----------------")
        return "\n".join(lines) + "\n"