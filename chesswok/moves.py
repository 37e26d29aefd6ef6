"""The move record passed between generators, the board and the UI."""

from dataclasses import dataclass

from .constants import EMPTY

Square = tuple[int, int]


@dataclass
class LegalMove:
    """A move of one piece; squares are (col, row) pairs."""

    to: Square
    from_: Square
    piece_to_move: int
    piece_at_end: int
    has_moved: bool = False
    is_en_passant: bool = False
    is_castle: bool = False
    is_promotion: bool = False
    promotion_piece: int = EMPTY
    additional_piece_has_moved: bool = False

    def __str__(self) -> str:
        to_col, to_row = self.to
        from_col, from_row = self.from_
        return (
            f"LegalMove(from=({from_col}, {from_row}), to=({to_col}, {to_row}), "
            f"pieceToMove={int(self.piece_to_move)}, pieceAtEnd={int(self.piece_at_end)})"
        )