"""High-level rules: legal-move aggregation, mandatory capture, game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import GameResult
from checkie.core.jump_chain import jump_chains
from checkie.core.move_generator import DEFAULT_VARIANT, MoveGenerator, Variant

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.move import Move
    from checkie.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Capture is mandatory for the whole side, but any maximal chain may be
    #   chosen (no longest-capture rule).
    # - A side to move with no pieces or no legal moves has lost.

    @staticmethod
    def legal_moves(
        board: Board,
        side: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> list[Move]:
        """All legal moves of *side*, jump chains only when any exist."""
        squares = board.pieces(side)

        chains: list[Move] = []
        for sq in squares:
            chains.extend(jump_chains(board, sq, side, variant=variant))
        if chains:
            return chains

        gen = MoveGenerator(board, variant)
        simple: list[Move] = []
        for sq in squares:
            simple.extend(gen.simple_moves(sq))
        return simple

    @staticmethod
    def moves_for_piece(
        board: Board,
        sq: Square,
        side: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> list[Move]:
        """Legal moves starting on *sq*; empty while another piece must capture."""
        return [m for m in Rules.legal_moves(board, side, variant) if m.from_sq == sq]

    @staticmethod
    def has_capture(
        board: Board,
        side: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> bool:
        gen = MoveGenerator(board, variant)
        return any(gen.captures(sq) for sq in board.pieces(side))

    @staticmethod
    def has_legal_moves(
        board: Board,
        side: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> bool:
        gen = MoveGenerator(board, variant)
        return any(gen.piece_moves(sq) for sq in board.pieces(side))

    @staticmethod
    def is_terminal(
        board: Board,
        side_to_move: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> bool:
        return not Rules.has_legal_moves(board, side_to_move, variant)

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        variant: Variant = DEFAULT_VARIANT,
    ) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        if Rules.is_terminal(board, side_to_move, variant):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.IN_PROGRESS
