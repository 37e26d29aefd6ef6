"""Mouse interaction: selecting pieces, showing their moves and playing them."""

import logging
from typing import Optional

import pygame

from .attacks import is_square_under_attack
from .board import Board, PromotionChooser
from .constants import EMPTY, NO_TILE_SELECTED, TILE_SIZE, WHITE
from .movegen import moves_from_piece_at
from .moves import LegalMove, Square

logger = logging.getLogger(__name__)

_SELECTED_COLOR = (255, 0, 0)
_MOVE_MARKER_COLOR = (80, 80, 80, 200)
_MOVE_MARKER_RADIUS = TILE_SIZE / 2.25
_MOVE_MARKER_THICKNESS = 6


class BoardInteractor:
    """Tracks the selected square and the moves available from it."""

    def __init__(self) -> None:
        self.selected_piece: Square = NO_TILE_SELECTED
        self.players_turn = WHITE
        self.moves_map: dict[Square, LegalMove] = {}

    def click(
        self,
        col: int,
        row: int,
        board: Board,
        choose_promotion: Optional[PromotionChooser] = None,
    ) -> Optional[LegalMove]:
        """Handle a click on (col, row); returns the move played, if any."""
        logger.debug(
            "square %d, %d is attacked: %s",
            row, col, is_square_under_attack(col, row, WHITE, board.squares),
        )
        clicked = (col, row)

        move = self.moves_map.get(clicked)
        if move is not None:
            logger.debug("move selected %s", move)
            board.do_move(move, choose_promotion)
            self.selected_piece = NO_TILE_SELECTED
            self.moves_map.clear()
            return move

        self.moves_map.clear()
        moves = moves_from_piece_at(col, row, board)
        if not moves and board.squares[row][col] == EMPTY:
            self.selected_piece = NO_TILE_SELECTED
            return None

        self.selected_piece = clicked
        for candidate in moves:
            self.moves_map[candidate.to] = candidate
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Highlight the selected square and ring each reachable square."""
        if self.selected_piece == NO_TILE_SELECTED:
            return
        col, row = self.selected_piece
        surface.fill(
            _SELECTED_COLOR,
            pygame.Rect(col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE),
        )

        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        outer_radius = round(_MOVE_MARKER_RADIUS + _MOVE_MARKER_THICKNESS)
        for target_col, target_row in self.moves_map:
            centre = (
                target_col * TILE_SIZE + TILE_SIZE // 2,
                target_row * TILE_SIZE + TILE_SIZE // 2,
            )
            pygame.draw.circle(
                overlay, _MOVE_MARKER_COLOR, centre, outer_radius, _MOVE_MARKER_THICKNESS
            )
        surface.blit(overlay, (0, 0))