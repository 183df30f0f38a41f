"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.move import Move

CancelCheck = Callable[[], bool]

DEFAULT_SEARCH_DEPTH = 5


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = DEFAULT_SEARCH_DEPTH
    time_limit_ms: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``candidates`` are the root moves sharing the best score; ``best_move`` is
    the one picked among them. ``completed`` is False when a timeout or
    cancellation cut the root loop short.
    """

    best_move: Move | None
    score: float
    depth: int
    nodes: int
    candidates: tuple[Move, ...] = ()
    completed: bool = True


class IEngine(Protocol):
    """Protocol for checkers engines used by the game and service layers."""

    def search(
        self,
        board: Board,
        side: Color,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
