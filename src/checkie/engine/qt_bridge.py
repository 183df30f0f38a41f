"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move_generator import DEFAULT_VARIANT, Variant
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import DEFAULT_SEARCH_DEPTH, IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move the worker to a ``QThread`` and drive it through queued signal
    connections; boards are immutable, so the request never shares mutable
    state with the caller's game.
    """

    best_move_ready = pyqtSignal(int, object, float, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_SEARCH_DEPTH,
        time_limit_ms: int | None = None,
        rng: random.Random | None = None,
        variant: Variant = DEFAULT_VARIANT,
    ) -> None:
        super().__init__()
        self._engine: IEngine = MinimaxEngine(rng=rng, variant=variant)
        self._limits = SearchLimits(max_depth=max_depth, time_limit_ms=time_limit_ms)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, side_obj: object, request_id: int) -> None:
        """Search for the best move of *side_obj* on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return
        if not isinstance(side_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid side")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                board_obj,
                side_obj,
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int, int)
    def set_limits(self, max_depth: int, time_limit_ms: int) -> None:
        """Update search limits (takes effect on the next search).

        A non-positive *time_limit_ms* removes the time limit.
        """
        self._limits = SearchLimits(
            max_depth=max_depth,
            time_limit_ms=time_limit_ms if time_limit_ms > 0 else None,
        )
