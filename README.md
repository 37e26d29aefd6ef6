# chesswok

A chess board for two players sharing one window. Click a piece to see where it
can go, then click one of the marked squares to move it. The board knows about
castling, en passant and pawn promotion; when a pawn reaches the last rank a
small menu lets you pick a queen, rook, bishop or knight.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the board.

## Playing

```
chesswok
chesswok --assets path/to/images
```

An 800×800 window titled "Wok" opens with the pieces in their starting places,
white at the bottom. Piece images are read from the directory given by
`--assets` (default: `assets` in the current directory). It must hold PNG files
named `whitePawn.png`, `whiteKnight.png`, `whiteBishop.png`, `whiteRook.png`,
`whiteKing.png`, `whiteQueen.png` and the same six names starting with `black`;
if one is missing the command stops with a `FileNotFoundError` before the
window opens.

- Left-click a piece: its square is filled in red and each square it can reach
  gets a grey ring.
- Left-click a ringed square: the piece moves there.
- Left-click anywhere else: the selection moves to that square, or is cleared
  if the square is empty.

When a pawn reaches the last rank, a dialog shows the queen, rook, bishop and
knight images for its side; click one to choose. Closing the window during the
dialog, or a missing image for it, gives a queen.

After every click the command prints the board's record of piece positions as a
grid (1 for white, 2 for black) to standard output, preceded by a
`Mismatch at ...` line for any square where that record disagrees with the
pieces on the board.

## Using the library

The rules can be used on their own, without a window:

```python
from chesswok.board import Board
from chesswok.movegen import moves_from_piece_at
from chesswok.attacks import is_square_under_attack
from chesswok.constants import Piece, WHITE

board = Board()
moves = moves_from_piece_at(4, 6, board)   # the white pawn on e2
for move in moves:
    print(move)

board.do_move(moves[0], choose_promotion=None)
print(is_square_under_attack(4, 4, WHITE, board.squares))
```

- `chesswok.constants` holds the `Piece` codes, `WHITE` (-1) and `BLACK` (1),
  `get_team(piece)` (raises `ValueError` for an empty square) and
  `in_bounds(index)`.
- `chesswok.moves.LegalMove` records one move: `to`, `from_`, `piece_to_move`,
  `piece_at_end` and flags for en passant, castling and promotion.
- `chesswok.pieces` has one generator per piece kind: `pawn_moves`,
  `knight_moves`, `bishop_moves`, `rook_moves`, `queen_moves` and `king_moves`.
  `chesswok.movegen.moves_from_piece_at(col, row, board)` picks the right one
  for whatever stands on the square.
- `chesswok.attacks.is_square_under_attack(col, row, color, squares)` tells
  whether the side opposing `color` attacks a square.
- `chesswok.board.Board` holds `squares` (indexed `[row][col]`), the last move
  played and which squares have seen a piece move.

Squares are addressed as `(col, row)` with `(0, 0)` at the top left, black's
side. `Board.do_move` takes an optional `choose_promotion` callable that is
given the mover's colour and returns the piece a promoting pawn becomes;
without it the pawn becomes a queen. `Board.tracker_mismatches()` and
`Board.format_tracker()` help check that the board's record of piece positions
stays in step with the squares.

## What it does not do

Moves are pseudo-legal: each piece follows its own movement rules, and castling
is offered only when the king and rook have not moved, the squares between them
are empty and none of the king's squares is attacked, but nothing stops a move
that leaves your own king in check. Turns are not enforced, and there is no
detection of check, checkmate or stalemate, no undo, no move list and no saving
or loading of games.

## Running the tests

```
pip install .[test]
pytest
```