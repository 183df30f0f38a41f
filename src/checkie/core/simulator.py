"""Board simulator: apply a fully specified move to a board."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.errors import IllegalMove
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import Square


def promote_on_arrival(piece: Piece, sq: Square) -> Piece:
    """Crown *piece* if *sq* lies on its promotion row."""
    if sq[0] == piece.color.promotion_row:
        return piece.promoted()
    return piece


def apply_move(board: Board, move: Move) -> Board:
    """Return the board after *move*; *board* itself is left untouched."""
    piece = board[move.from_sq]
    if piece is None:
        raise IllegalMove(f"No piece on {move.from_sq}")

    changes: dict[Square, Piece | None] = {move.from_sq: None}
    for sq in move.captured:
        changes[sq] = None
    changes[move.to_sq] = promote_on_arrival(piece, move.to_sq)
    return board.replace(changes)
