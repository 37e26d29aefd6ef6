import pytest

from chesswok.constants import (
    BISHOP_OFFSETS,
    BLACK,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_OFFSETS,
    WHITE,
    Piece,
    get_team,
    in_bounds,
)

WHITE_PIECES = [
    Piece.WHITE_PAWN,
    Piece.WHITE_KNIGHT,
    Piece.WHITE_BISHOP,
    Piece.WHITE_ROOK,
    Piece.WHITE_KING,
    Piece.WHITE_QUEEN,
]
BLACK_PIECES = [
    Piece.BLACK_PAWN,
    Piece.BLACK_KNIGHT,
    Piece.BLACK_BISHOP,
    Piece.BLACK_ROOK,
    Piece.BLACK_KING,
    Piece.BLACK_QUEEN,
]


def _targets_in_bounds(col, row, offsets):
    return [
        (col + dc, row + dr)
        for dc, dr in offsets
        if in_bounds(col + dc) and in_bounds(row + dr)
    ]


@pytest.mark.parametrize(
    "code, team",
    [(7, WHITE), (12, WHITE), (13, BLACK), (18, BLACK)],
)
def test_team_boundary_at_raw_codes(code, team):
    assert get_team(code) == team


@pytest.mark.parametrize("piece", WHITE_PIECES)
def test_white_pieces_are_white(piece):
    assert get_team(piece) == WHITE


@pytest.mark.parametrize("piece", BLACK_PIECES)
def test_black_pieces_are_black(piece):
    assert get_team(piece) == BLACK


def test_get_team_accepts_plain_ints():
    assert get_team(int(Piece.WHITE_KING)) == WHITE
    assert get_team(int(Piece.BLACK_KING)) == BLACK


def test_get_team_rejects_empty():
    with pytest.raises(ValueError):
        get_team(Piece.EMPTY)


def test_get_team_rejects_raw_zero():
    with pytest.raises(ValueError):
        get_team(0)


def test_opposing_pieces_have_opposite_teams():
    assert get_team(Piece.WHITE_PAWN) == -get_team(Piece.BLACK_PAWN)


@pytest.mark.parametrize("index", range(8))
def test_in_bounds_on_board(index):
    assert in_bounds(index) is True


@pytest.mark.parametrize("index", [-1, 8, -100, 100])
def test_in_bounds_off_board(index):
    assert in_bounds(index) is False


def test_king_offsets_from_corner_reach_three_squares():
    assert sorted(_targets_in_bounds(0, 0, KING_OFFSETS)) == [(0, 1), (1, 0), (1, 1)]


def test_king_offsets_from_centre_reach_eight_distinct_squares():
    assert len(set(_targets_in_bounds(4, 4, KING_OFFSETS))) == 8


def test_knight_offsets_from_corner_reach_two_squares():
    assert sorted(_targets_in_bounds(0, 0, KNIGHT_OFFSETS)) == [(1, 2), (2, 1)]


def test_knight_offsets_from_centre_reach_eight_distinct_squares():
    assert len(set(_targets_in_bounds(4, 4, KNIGHT_OFFSETS))) == 8


def test_bishop_and_rook_offsets_from_corner():
    assert _targets_in_bounds(7, 7, BISHOP_OFFSETS) == [(6, 6)]
    assert sorted(_targets_in_bounds(7, 7, ROOK_OFFSETS)) == [(6, 7), (7, 6)]