from itertools import product

import pygame
import pytest

from chesswok.board import Board
from chesswok.constants import CREAM_TILE_COLOR, GREEN_TILE_COLOR, TILE_SIZE, Piece
from chesswok.drawer import BoardDrawer
from chesswok.textures import PIECE_NAMES, TextureManager


def _colour(index):
    return (20 + index * 15, 90, 160)


@pytest.fixture
def textures(tmp_path):
    for index, name in enumerate(PIECE_NAMES):
        image = pygame.Surface((10, 10))
        image.fill(_colour(index))
        pygame.image.save(image, str(tmp_path / f"{name}.png"))
    manager = TextureManager(tmp_path)
    manager.load()
    return manager


def _green_surface():
    surface = pygame.Surface((8 * TILE_SIZE, 8 * TILE_SIZE))
    surface.fill(GREEN_TILE_COLOR)
    return surface


def _centre(surface, col, row):
    half = TILE_SIZE // 2
    return tuple(surface.get_at((col * TILE_SIZE + half, row * TILE_SIZE + half)))[:3]


def test_top_left_tile_is_cream(textures):
    surface = _green_surface()
    BoardDrawer(textures).draw_board(surface)
    assert _centre(surface, 0, 0) == CREAM_TILE_COLOR
    assert _centre(surface, 1, 0) == GREEN_TILE_COLOR
    assert _centre(surface, 0, 1) == GREEN_TILE_COLOR
    assert _centre(surface, 1, 1) == CREAM_TILE_COLOR


def test_board_is_checkered(textures):
    surface = _green_surface()
    BoardDrawer(textures).draw_board(surface)
    cream = [
        (col, row)
        for col, row in product(range(8), range(8))
        if _centre(surface, col, row) == CREAM_TILE_COLOR
    ]
    assert len(cream) == 32
    assert all((col + row) % 2 == 0 for col, row in cream)


def test_pieces_drawn_on_their_squares(textures):
    surface = _green_surface()
    BoardDrawer(textures).draw_pieces(Board(), surface)
    assert _centre(surface, 0, 0) == _colour(PIECE_NAMES.index("blackRook"))
    assert _centre(surface, 4, 7) == _colour(PIECE_NAMES.index("whiteKing"))
    assert _centre(surface, 3, 0) == _colour(PIECE_NAMES.index("blackQueen"))
    assert _centre(surface, 3, 4) == GREEN_TILE_COLOR


def test_sprites_fill_whole_tile(textures):
    surface = _green_surface()
    BoardDrawer(textures).draw_pieces(Board(), surface)
    expected = _colour(PIECE_NAMES.index("blackRook"))
    assert tuple(surface.get_at((0, 0)))[:3] == expected
    assert tuple(surface.get_at((TILE_SIZE - 1, TILE_SIZE - 1)))[:3] == expected


def test_drawn_pieces_follow_board_changes(textures):
    board = Board()
    board.squares[4][4] = Piece.WHITE_KNIGHT
    surface = _green_surface()
    BoardDrawer(textures).draw_pieces(board, surface)
    assert _centre(surface, 4, 4) == _colour(PIECE_NAMES.index("whiteKnight"))