"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object for one turn of one piece.

    ``captured`` lists the captured squares in the order they are removed along
    the jump chain; it is empty for a simple move. ``path`` holds the landing
    square of every step and is not part of move identity.
    """

    from_sq: Square
    to_sq: Square
    captured: tuple[Square, ...] = ()
    path: tuple[Square, ...] = field(default=(), compare=False)

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    @property
    def landings(self) -> tuple[Square, ...]:
        """Landing square of each step, ending with ``to_sq``."""
        if self.path:
            return self.path
        return (self.to_sq,)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        squares = (self.from_sq,) + self.landings
        return sep.join(square_name(sq) for sq in squares)
