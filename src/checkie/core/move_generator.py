"""Per-piece move generation: simple moves and single-step captures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkie.core.move import Move
from checkie.core.types import DIAGONAL_RAYS, DIAGONALS, Square

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Variant:
    """Rule switches that differ between checkers variants."""

    # Men may also capture along their two backward diagonals.
    men_capture_backward: bool = False


DEFAULT_VARIANT = Variant()

_ALL_DIRECTIONS: tuple[int, ...] = tuple(range(len(DIAGONALS)))
# Indexes into DIAGONALS / DIAGONAL_RAYS pointing toward decreasing / increasing rows.
_UP_DIRECTIONS: tuple[int, ...] = tuple(
    i for i, (dr, _) in enumerate(DIAGONALS) if dr < 0
)
_DOWN_DIRECTIONS: tuple[int, ...] = tuple(
    i for i, (dr, _) in enumerate(DIAGONALS) if dr > 0
)


def _forward_directions(piece: Piece) -> tuple[int, ...]:
    return _UP_DIRECTIONS if piece.color.forward < 0 else _DOWN_DIRECTIONS


class MoveGenerator:
    """Generates non-chained moves for single pieces on a :class:`Board`.

    Mandatory capture and jump chaining are applied one level up, by
    :mod:`checkie.core.jump_chain` and :class:`checkie.core.rules.Rules`.
    """

    __slots__ = ("_board", "_variant")

    def __init__(self, board: Board, variant: Variant = DEFAULT_VARIANT) -> None:
        self._board = board
        self._variant = variant

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, sq: Square) -> list[Move]:
        """Single captures followed by simple moves of the piece on *sq*."""
        return self.captures(sq) + self.simple_moves(sq)

    def simple_moves(self, sq: Square) -> list[Move]:
        """Non-capturing moves of the piece on *sq*."""
        piece = self._board[sq]
        if piece is None:
            return []

        board = self._board
        rays = DIAGONAL_RAYS[sq]
        moves: list[Move] = []
        if piece.is_king:
            for direction in _ALL_DIRECTIONS:
                for target in rays[direction]:
                    if board[target] is not None:
                        break
                    moves.append(Move(sq, target, (), (target,)))
            return moves

        for direction in _forward_directions(piece):
            ray = rays[direction]
            if ray and board[ray[0]] is None:
                moves.append(Move(sq, ray[0], (), (ray[0],)))
        return moves

    def captures(self, sq: Square) -> list[Move]:
        """Single-step captures of the piece on *sq*, one captured square each."""
        piece = self._board[sq]
        if piece is None:
            return []
        if piece.is_king:
            return self._king_captures(sq, piece)
        return self._man_captures(sq, piece)

    # -- Internals ----------------------------------------------------------

    def _man_captures(self, sq: Square, piece: Piece) -> list[Move]:
        board = self._board
        rays = DIAGONAL_RAYS[sq]
        if self._variant.men_capture_backward:
            directions = _ALL_DIRECTIONS
        else:
            directions = _forward_directions(piece)

        moves: list[Move] = []
        for direction in directions:
            ray = rays[direction]
            if len(ray) < 2:
                continue
            jumped, landing = ray[0], ray[1]
            victim = board[jumped]
            if victim is None or victim.color == piece.color:
                continue
            if board[landing] is None:
                moves.append(Move(sq, landing, (jumped,), (landing,)))
        return moves

    def _king_captures(self, sq: Square, piece: Piece) -> list[Move]:
        board = self._board
        moves: list[Move] = []
        for ray in DIAGONAL_RAYS[sq]:
            jumped: Square | None = None
            for target in ray:
                occupant = board[target]
                if occupant is None:
                    if jumped is not None:
                        moves.append(Move(sq, target, (jumped,), (target,)))
                    continue
                # Own piece, or a second opponent piece, ends the ray.
                if occupant.color == piece.color or jumped is not None:
                    break
                jumped = target
        return moves
