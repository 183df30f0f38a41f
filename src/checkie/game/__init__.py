"""Game management layer — turn state machine and move history.

Quick start::

    from checkie.game import GameState

    game = GameState()
    game.setup()
    game.apply_move(game.legal_moves()[0])
"""

from checkie.game.interfaces import GamePhase
from checkie.game.state import GameState, MoveRecord, PendingChain

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
    "PendingChain",
]
