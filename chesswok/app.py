"""The game window: event loop, drawing and the promotion dialog."""

import argparse
import sys
from pathlib import Path
from typing import Optional

import pygame

from .board import Board
from .constants import (
    GREEN_TILE_COLOR,
    TILE_SIZE,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Piece,
)
from .drawer import BoardDrawer
from .interactor import BoardInteractor
from .textures import TextureManager

_PROMOTION_KINDS = ("Queen", "Rook", "Bishop", "Knight")
_ICON_SCALE = 1.5
_DIALOG_SIZE = (400, 150)
_ICON_SPACING = 20
_ICON_TOP_MARGIN = 30


def _dialog_rect(width: int, height: int) -> pygame.Rect:
    dialog_w, dialog_h = _DIALOG_SIZE
    return pygame.Rect((width - dialog_w) / 2, (height - dialog_h) / 2, dialog_w, dialog_h)


def _icon_rects(
    width: int, height: int, icon_sizes: list[tuple[int, int]]
) -> list[pygame.Rect]:
    """Positions of the promotion icons, spaced evenly inside the centred dialog."""
    dialog = _dialog_rect(width, height)
    icon_width = icon_sizes[0][0]
    total = len(icon_sizes) * icon_width + (len(icon_sizes) - 1) * _ICON_SPACING
    start_x = dialog.x + (dialog.width - total) / 2
    top = dialog.y + _ICON_TOP_MARGIN
    return [
        pygame.Rect(round(start_x + i * (icon_width + _ICON_SPACING)), round(top), w, h)
        for i, (w, h) in enumerate(icon_sizes)
    ]


def show_promotion_menu(surface: pygame.Surface, color: int, asset_dir="assets") -> Piece:
    """Let the player pick a promotion piece; falls back to a queen on failure or close."""
    side = "WHITE" if color == WHITE else "BLACK"
    prefix = side.lower()
    default = Piece[f"{side}_QUEEN"]

    icons = []
    for kind in _PROMOTION_KINDS:
        path = Path(asset_dir) / f"{prefix}{kind}.png"
        try:
            image = pygame.image.load(str(path))
        except (FileNotFoundError, pygame.error):
            print(f"Failed to load {path}", file=sys.stderr)
            return default
        scaled = (round(image.get_width() * _ICON_SCALE), round(image.get_height() * _ICON_SCALE))
        icons.append(pygame.transform.scale(image, scaled))
    choices = [Piece[f"{side}_{kind.upper()}"] for kind in _PROMOTION_KINDS]

    width, height = surface.get_size()
    rects = _icon_rects(width, height, [icon.get_size() for icon in icons])
    dialog = _dialog_rect(width, height)

    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 180))
    background = pygame.Surface(dialog.size, pygame.SRCALPHA)
    background.fill((50, 50, 50, 220))

    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                print("Window closed during promotion menu.", file=sys.stderr)
                return default
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for choice, rect in zip(choices, rects):
                    if rect.collidepoint(event.pos):
                        return choice

        surface.fill((0, 0, 0))
        surface.blit(overlay, (0, 0))
        surface.blit(background, dialog.topleft)
        pygame.draw.rect(surface, (255, 255, 255), dialog.inflate(6, 6), 3)
        for icon, rect in zip(icons, rects):
            surface.blit(icon, rect.topleft)
        pygame.display.flip()
        clock.tick(60)


def _report_trackers(board: Board) -> None:
    for col, row, tracked, expected in board.tracker_mismatches():
        print(f"Mismatch at [{col}][{row}]: tracker={tracked}, squares={expected}")
    print(board.format_tracker(), end="")


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="chesswok", description="Play chess on a local board.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding the piece images"
    )
    args = parser.parse_args(argv)

    textures = TextureManager(args.assets)
    textures.load()

    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Wok")
        board = Board()
        interactor = BoardInteractor()
        drawer = BoardDrawer(textures)

        def choose_promotion(color: int) -> Piece:
            return show_promotion_menu(window, color, args.assets)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    x, y = event.pos
                    interactor.click(x // TILE_SIZE, y // TILE_SIZE, board, choose_promotion)
                    _report_trackers(board)

            window.fill(GREEN_TILE_COLOR)
            drawer.draw_board(window)
            interactor.draw(window)
            drawer.draw_pieces(board, window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())