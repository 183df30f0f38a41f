"""Boundary operations for transport collaborators.

Inputs are validated before any generation or search runs. Invalid input comes
back as a failed :class:`Reply` rather than an exception; given a well-formed
board the rules and search code below cannot fail.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from checkie.config import Config
from checkie.core.board import Board
from checkie.core.contract import board_from_cells, move_from_dict, square_from_value
from checkie.core.enums import Color
from checkie.core.errors import CheckersError, IllegalMove, InvalidRequest
from checkie.core.move import Move
from checkie.core.rules import Rules
from checkie.core.simulator import apply_move
from checkie.core.types import Square
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import CancelCheck, SearchLimits

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

BoardInput = Board | Sequence[Sequence[Mapping[str, Any] | None]]
SideInput = Color | str
SquareInput = Square | Sequence[int]
MoveInput = Move | Mapping[str, Any]


@dataclass(slots=True, frozen=True)
class Reply(Generic[T]):
    """Either a value or the :class:`CheckersError` that prevented it."""

    value: T | None = None
    error: CheckersError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """The value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _guarded(operation: str, func: Callable[[], T]) -> Reply[T]:
    try:
        return Reply(value=func())
    except CheckersError as exc:
        _LOGGER.warning("%s rejected (%s): %s", operation, exc.kind, exc)
        return Reply(error=exc)


# ── Input coercion ───────────────────────────────────────────────────────────


def coerce_board(board: BoardInput) -> Board:
    if isinstance(board, Board):
        return board
    return board_from_cells(board)


def coerce_side(side: SideInput) -> Color:
    if isinstance(side, Color):
        return side
    if not isinstance(side, str):
        raise InvalidRequest(f"Side must be a color name: {side!r}")
    try:
        return Color.parse(side)
    except ValueError as exc:
        raise InvalidRequest(str(exc)) from None


def coerce_move(move: MoveInput) -> Move:
    if isinstance(move, Move):
        return move
    return move_from_dict(move)


def _config(config: Config | None) -> Config:
    return config if config is not None else Config()


# ── Operations ───────────────────────────────────────────────────────────────


def list_legal_moves(
    board: BoardInput,
    side: SideInput,
    *,
    config: Config | None = None,
) -> Reply[list[Move]]:
    """All legal moves of *side*, enforcing mandatory capture."""
    cfg = _config(config)
    return _guarded(
        "list_legal_moves",
        lambda: Rules.legal_moves(
            coerce_board(board), coerce_side(side), cfg.rules.variant()
        ),
    )


def list_moves_for_piece(
    board: BoardInput,
    position: SquareInput,
    side: SideInput,
    *,
    config: Config | None = None,
) -> Reply[list[Move]]:
    """Legal moves of the piece on *position*; empty if another piece must capture."""
    cfg = _config(config)

    def run() -> list[Move]:
        checked_board = coerce_board(board)
        sq = square_from_value(position)
        return Rules.moves_for_piece(
            checked_board, sq, coerce_side(side), cfg.rules.variant()
        )

    return _guarded("list_moves_for_piece", run)


def compute_best_move(
    board: BoardInput,
    side: SideInput,
    depth: int | None = None,
    *,
    rng: random.Random | None = None,
    time_limit_ms: int | None = None,
    is_cancelled: CancelCheck | None = None,
    config: Config | None = None,
) -> Reply[Move | None]:
    """The engine's move for *side*; a ``None`` value means it has no legal move."""
    cfg = _config(config)

    def run() -> Move | None:
        checked_board = coerce_board(board)
        color = coerce_side(side)
        max_depth = cfg.search.depth if depth is None else depth
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth <= 0:
            raise InvalidRequest(f"Search depth must be a positive integer: {max_depth!r}")

        source = rng
        if source is None and cfg.search.seed is not None:
            source = random.Random(cfg.search.seed)
        limit = time_limit_ms if time_limit_ms is not None else cfg.search.time_limit_ms
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise InvalidRequest(f"Time limit must be an integer in ms: {limit!r}")
        engine = MinimaxEngine(rng=source, variant=cfg.rules.variant())
        result = engine.search(
            checked_board,
            color,
            SearchLimits(max_depth=max_depth, time_limit_ms=limit),
            is_cancelled,
        )
        _LOGGER.debug(
            "compute_best_move side=%s depth=%d -> %s (%d nodes)",
            color,
            max_depth,
            result.best_move,
            result.nodes,
        )
        return result.best_move

    return _guarded("compute_best_move", run)


def play_move(
    board: BoardInput,
    side: SideInput,
    move: MoveInput,
    *,
    config: Config | None = None,
) -> Reply[Board]:
    """Board after *move*, which must be one of *side*'s legal moves.

    Moves are matched on origin, destination and captured sequence.
    """
    cfg = _config(config)

    def run() -> Board:
        checked_board = coerce_board(board)
        color = coerce_side(side)
        wanted = coerce_move(move)
        legal = Rules.legal_moves(checked_board, color, cfg.rules.variant())
        if wanted not in legal:
            raise IllegalMove(f"Illegal move for {color}: {wanted}")
        return apply_move(checked_board, wanted)

    return _guarded("play_move", run)
