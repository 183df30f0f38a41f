"""Checkers engine package: evaluation, minimax search and worker harnesses.

The Qt worker lives in :mod:`checkie.engine.qt_bridge` and is imported
explicitly so that headless users never load Qt.
"""

from checkie.engine.evaluation import evaluate
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.pool import EnginePool
from checkie.engine.search import (
    DEFAULT_SEARCH_DEPTH,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

DefaultEngine: type[IEngine] = MinimaxEngine

__all__ = [
    "CancelCheck",
    "DEFAULT_SEARCH_DEPTH",
    "DefaultEngine",
    "EnginePool",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "evaluate",
]
