"""Process pool running searches away from the caller's thread or event loop."""

from __future__ import annotations

import logging
import os
import random
from concurrent.futures import Future, ProcessPoolExecutor
from typing import Any

from checkie.core.board import Board
from checkie.core.contract import (
    board_from_cells,
    board_to_cells,
    move_from_dict,
    move_to_dict,
)
from checkie.core.enums import Color
from checkie.core.move_generator import Variant
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import DEFAULT_SEARCH_DEPTH, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)


def _run_search(
    cells: list[list[dict[str, Any] | None]],
    side_name: str,
    depth: int,
    time_limit_ms: int | None,
    seed: int | None,
    men_capture_backward: bool,
) -> dict[str, Any]:
    """Run a blocking search and return a plain, picklable result."""
    board = board_from_cells(cells)
    side = Color.parse(side_name)
    engine = MinimaxEngine(
        rng=random.Random(seed),
        variant=Variant(men_capture_backward=men_capture_backward),
    )
    result = engine.search(board, side, SearchLimits(depth, time_limit_ms))
    return {
        "best_move": move_to_dict(result.best_move) if result.best_move else None,
        "score": result.score,
        "depth": result.depth,
        "nodes": result.nodes,
        "candidates": [move_to_dict(m) for m in result.candidates],
        "completed": result.completed,
    }


def result_from_dict(data: dict[str, Any]) -> SearchResult:
    """Rebuild a :class:`SearchResult` from a worker's plain result."""
    best = data["best_move"]
    return SearchResult(
        best_move=move_from_dict(best) if best is not None else None,
        score=data["score"],
        depth=data["depth"],
        nodes=data["nodes"],
        candidates=tuple(move_from_dict(m) for m in data["candidates"]),
        completed=data["completed"],
    )


class EnginePool:
    """ProcessPoolExecutor sized to (cpu_count - 1) cores.

    Each request carries its own board as a contract grid, so workers never share
    board state with each other or with the caller.
    """

    def __init__(
        self,
        depth: int = DEFAULT_SEARCH_DEPTH,
        *,
        time_limit_ms: int | None = None,
        variant: Variant | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.depth = depth
        self.time_limit_ms = time_limit_ms
        self.variant = variant or Variant()
        cores = os.cpu_count() or 2
        self.max_workers = max_workers or max(1, cores - 1)
        self.pool: ProcessPoolExecutor | None = None

    def start(self) -> None:
        if self.pool is None:
            self.pool = ProcessPoolExecutor(max_workers=self.max_workers)
            _LOGGER.debug("Engine pool started with %d workers", self.max_workers)

    def submit(
        self,
        board: Board,
        side: Color,
        *,
        depth: int | None = None,
        seed: int | None = None,
    ) -> Future[dict[str, Any]]:
        """Queue a search; the future resolves to a plain result mapping."""
        max_depth = self.depth if depth is None else depth
        if max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        if self.pool is None:
            raise RuntimeError("Engine pool is not started")
        return self.pool.submit(
            _run_search,
            board_to_cells(board),
            str(side),
            max_depth,
            self.time_limit_ms,
            seed,
            self.variant.men_capture_backward,
        )

    def best_move(
        self,
        board: Board,
        side: Color,
        *,
        depth: int | None = None,
        seed: int | None = None,
        timeout: float | None = None,
    ) -> SearchResult:
        """Blocking helper around :meth:`submit`."""
        future = self.submit(board, side, depth=depth, seed=seed)
        return result_from_dict(future.result(timeout=timeout))

    def shutdown(self) -> None:
        if self.pool:
            self.pool.shutdown(wait=False, cancel_futures=True)
            self.pool = None

    def __enter__(self) -> EnginePool:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
