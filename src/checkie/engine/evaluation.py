"""Static board evaluation."""

from __future__ import annotations

from collections.abc import Callable

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece

MAN_VALUE = 10.0
KING_BONUS = 20.0
ADVANCE_WEIGHT = 0.5

Evaluator = Callable[[Board, Color], float]


def advancement(piece: Piece, row: int) -> int:
    """Rows travelled from the piece's home edge toward its promotion row."""
    if piece.color == Color.LIGHT:
        return 7 - row
    return row


def piece_value(piece: Piece, row: int) -> float:
    value = MAN_VALUE + ADVANCE_WEIGHT * advancement(piece, row)
    if piece.is_king:
        value += KING_BONUS
    return value


def evaluate(board: Board, side: Color) -> float:
    """Score *board* from *side*'s point of view; positive favours *side*.

    Swapping *side* negates the score on the same board.
    """
    score = 0.0
    for (row, _), piece in board.occupied():
        value = piece_value(piece, row)
        if piece.color == side:
            score += value
        else:
            score -= value
    return score
