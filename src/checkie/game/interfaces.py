"""Shared enums for the game layer."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    MID_CAPTURE = auto()  # a jump chain is partly played
    GAME_OVER = auto()
