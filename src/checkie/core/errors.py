"""Error kinds raised at the entry boundary of the rules engine.

Every error is a :class:`ValueError` so callers that only care about bad input
can catch the builtin. ``kind`` is a stable identifier for transport layers.
"""

from __future__ import annotations

from typing import ClassVar


class CheckersError(ValueError):
    """Base class for invalid input rejected by the engine."""

    kind: ClassVar[str] = "checkers_error"


class InvalidPosition(CheckersError):
    """Coordinates outside the 8x8 board."""

    kind = "invalid_position"


class IllegalMove(CheckersError):
    """Requested move is not in the legal-move set for the side or piece."""

    kind = "illegal_move"


class MalformedBoard(CheckersError):
    """Wrong board dimensions or an invalid cell encoding."""

    kind = "malformed_board"


class InvalidRequest(CheckersError):
    """Unknown side name, bad search depth or unparseable payload."""

    kind = "invalid_request"
