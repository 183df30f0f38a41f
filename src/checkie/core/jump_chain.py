"""Jump-chain enumeration: maximal multi-capture sequences of one piece.

A chain may not stop on a square from which the same piece can capture
again, but chains of different lengths are all reported; no longest-capture
rule is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.move import Move
from checkie.core.move_generator import DEFAULT_VARIANT, MoveGenerator, Variant
from checkie.core.simulator import apply_move

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.types import Square


def jump_chains(
    board: Board,
    sq: Square,
    side: Color,
    captured: tuple[Square, ...] = (),
    *,
    origin: Square | None = None,
    variant: Variant = DEFAULT_VARIANT,
) -> list[Move]:
    """All maximal jump chains for the piece of *side* on *sq*.

    *captured* is the capture list already accumulated this turn and *origin*
    the square the piece started the turn on (defaults to *sq*). Returns an
    empty list when the piece has no capture or *sq* does not hold a piece of
    *side*.
    """
    piece = board[sq]
    if piece is None or piece.color != side:
        return []
    start = sq if origin is None else origin
    return _extend(board, start, sq, tuple(captured), (), variant)


def _extend(
    board: Board,
    origin: Square,
    current: Square,
    captured: tuple[Square, ...],
    path: tuple[Square, ...],
    variant: Variant,
) -> list[Move]:
    chains: list[Move] = []
    for step in MoveGenerator(board, variant).captures(current):
        # Captured pieces leave the board at once, so they cannot be jumped twice.
        child = apply_move(board, step)
        taken = captured + step.captured
        landings = path + (step.to_sq,)
        continuations = _extend(child, origin, step.to_sq, taken, landings, variant)
        if continuations:
            chains.extend(continuations)
        else:
            chains.append(Move(origin, step.to_sq, taken, landings))
    return chains
