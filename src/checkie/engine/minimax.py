"""Pure-Python checkers search (minimax + alpha-beta, randomized tie-break)."""

from __future__ import annotations

import logging
import math
import random
from time import perf_counter, sleep

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import DEFAULT_VARIANT, Variant
from checkie.core.rules import Rules
from checkie.core.simulator import apply_move
from checkie.engine.evaluation import Evaluator, evaluate
from checkie.engine.search import CancelCheck, IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = math.inf
_YIELD_EVERY_NODES = 4096


def _never_cancelled() -> bool:
    return False


class MinimaxEngine(IEngine):
    """Fixed-depth minimax with alpha-beta pruning.

    Every root move is searched with a full window so that each root score is
    exact; the best move is drawn from the moves sharing the best score using
    the injected random source. There is no transposition table, iterative
    deepening or move ordering.

    Args:
        rng: Random source for tie-breaks. Pass a seeded ``random.Random`` for
            reproducible choices.
        prune: Cut off siblings once ``beta <= alpha``. Disabling it gives a
            plain minimax over the same tree.
        variant: Rule switches forwarded to move generation.
        evaluator: Static evaluation used at leaves.
    """

    __slots__ = (
        "_rng",
        "_prune",
        "_variant",
        "_evaluate",
        "_cancel_check",
        "_deadline",
        "_nodes",
        "_last_yield_nodes",
        "_stopped",
    )

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        prune: bool = True,
        variant: Variant = DEFAULT_VARIANT,
        evaluator: Evaluator = evaluate,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._prune = prune
        self._variant = variant
        self._evaluate = evaluator
        self._cancel_check: CancelCheck = _never_cancelled
        self._deadline: float | None = None
        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def search(
        self,
        board: Board,
        side: Color,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False
        self._cancel_check = is_cancelled or _never_cancelled
        self._deadline = None
        if limits.time_limit_ms is not None:
            ms = max(limits.time_limit_ms, 1)
            self._deadline = perf_counter() + (ms / 1000.0)

        root_moves = Rules.legal_moves(board, side, self._variant)
        if not root_moves:
            return SearchResult(None, self._evaluate(board, side), 0, self._nodes)

        scored = self._score_root_moves(board, side, root_moves, limits.max_depth)
        completed = len(scored) == len(root_moves)

        if not scored:
            _LOGGER.info("Search stopped before any root move finished")
            fallback = root_moves[0]
            return SearchResult(
                fallback,
                self._evaluate(board, side),
                0,
                self._nodes,
                (fallback,),
                completed=False,
            )

        best_score = max(score for _, score in scored)
        candidates = tuple(move for move, score in scored if score == best_score)
        best_move = self._rng.choice(candidates)
        if not completed:
            _LOGGER.info(
                "Search stopped after %d of %d root moves", len(scored), len(root_moves)
            )
        _LOGGER.debug(
            "Picked %s (score %s, %d tied, %d nodes)",
            best_move,
            best_score,
            len(candidates),
            self._nodes,
        )
        return SearchResult(
            best_move,
            best_score,
            limits.max_depth,
            self._nodes,
            candidates,
            completed,
        )

    def score_root_moves(
        self,
        board: Board,
        side: Color,
        depth: int,
    ) -> list[tuple[Move, float]]:
        """Exact minimax score of every legal root move for *side*."""
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")
        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False
        self._cancel_check = _never_cancelled
        self._deadline = None
        root_moves = Rules.legal_moves(board, side, self._variant)
        return self._score_root_moves(board, side, root_moves, depth)

    def _score_root_moves(
        self,
        board: Board,
        side: Color,
        root_moves: list[Move],
        depth: int,
    ) -> list[tuple[Move, float]]:
        scored: list[tuple[Move, float]] = []
        opponent = side.opposite
        for move in root_moves:
            if self._should_stop():
                break

            child = apply_move(board, move)
            score = self._minimax(
                child,
                depth - 1,
                -_INF_SCORE,
                _INF_SCORE,
                maximizing=False,
                side_to_move=opponent,
                root_side=side,
            )
            # A search interrupted mid-move returns a partial score; drop it.
            if self._stopped:
                break
            scored.append((move, score))
        return scored

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        side_to_move: Color,
        root_side: Color,
    ) -> float:
        self._nodes += 1
        if self._should_stop():
            return self._evaluate(board, root_side)

        if depth <= 0:
            return self._evaluate(board, root_side)

        moves = Rules.legal_moves(board, side_to_move, self._variant)
        if not moves:
            return self._evaluate(board, root_side)

        opponent = side_to_move.opposite
        if maximizing:
            best = -_INF_SCORE
            for move in moves:
                value = self._minimax(
                    apply_move(board, move),
                    depth - 1,
                    alpha,
                    beta,
                    False,
                    opponent,
                    root_side,
                )
                best = max(best, value)
                alpha = max(alpha, best)
                if self._prune and beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in moves:
            value = self._minimax(
                apply_move(board, move),
                depth - 1,
                alpha,
                beta,
                True,
                opponent,
                root_side,
            )
            best = min(best, value)
            beta = min(beta, best)
            if self._prune and beta <= alpha:
                break
        return best

    def _should_stop(self) -> bool:
        if self._stopped:
            return True
        if self._nodes - self._last_yield_nodes >= _YIELD_EVERY_NODES:
            self._last_yield_nodes = self._nodes
            sleep(0.001)
        if self._cancel_check() or (
            self._deadline is not None and perf_counter() >= self._deadline
        ):
            self._stopped = True
        return self._stopped
