from chesswok.constants import EMPTY, Piece
from chesswok.moves import LegalMove


def test_str_format():
    move = LegalMove((4, 4), (4, 6), Piece.WHITE_PAWN, Piece.EMPTY)
    assert str(move) == "LegalMove(from=(4, 6), to=(4, 4), pieceToMove=7, pieceAtEnd=0)"


def test_str_shows_captured_piece_code():
    move = LegalMove((3, 0), (3, 7), Piece.WHITE_QUEEN, Piece.BLACK_QUEEN)
    assert str(move).endswith("pieceToMove=12, pieceAtEnd=18)")


def test_defaults():
    move = LegalMove((0, 0), (0, 1), Piece.WHITE_ROOK, EMPTY)
    assert move.has_moved is False
    assert move.is_en_passant is False
    assert move.is_castle is False
    assert move.is_promotion is False
    assert move.promotion_piece == EMPTY
    assert move.additional_piece_has_moved is False


def test_fields_are_mutable():
    move = LegalMove((0, 0), (0, 1), Piece.WHITE_PAWN, EMPTY)
    move.promotion_piece = Piece.WHITE_KNIGHT
    move.is_promotion = True
    assert move.promotion_piece == Piece.WHITE_KNIGHT
    assert move.is_promotion is True


def test_equality_by_value():
    a = LegalMove((2, 2), (1, 0), Piece.BLACK_KNIGHT, EMPTY)
    b = LegalMove((2, 2), (1, 0), Piece.BLACK_KNIGHT, EMPTY)
    assert a == b
    b.is_castle = True
    assert a != b