"""Rendering of the board background and the pieces on it."""

import pygame

from .board import Board
from .constants import BOARD_SIZE, CREAM_TILE_COLOR, EMPTY, TILE_SIZE, Piece


class BoardDrawer:
    """Draws cream tiles over a green background and pieces scaled to a tile."""

    def __init__(self, textures) -> None:
        self._sprites: dict[int, pygame.Surface] = {
            piece: pygame.transform.scale(textures.texture(piece), (TILE_SIZE, TILE_SIZE))
            for piece in Piece
            if piece != EMPTY
        }

    def draw_board(self, surface: pygame.Surface) -> None:
        """Paint the cream tiles; the green ones are left as the background."""
        offset = 0
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE // 2):
                tile = pygame.Rect(
                    x * TILE_SIZE, (y * 2 + offset) * TILE_SIZE, TILE_SIZE, TILE_SIZE
                )
                surface.fill(CREAM_TILE_COLOR, tile)
            offset ^= 1

    def draw_pieces(self, board: Board, surface: pygame.Surface) -> None:
        """Blit every piece on the board onto its tile."""
        for row, cells in enumerate(board.squares):
            for col, piece in enumerate(cells):
                if piece != EMPTY:
                    surface.blit(self._sprites[piece], (col * TILE_SIZE, row * TILE_SIZE))