"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Rank

# Board-text character <-> (Color, Rank)
_CHAR_MAP: dict[str, tuple[Color, Rank]] = {
    "l": (Color.LIGHT, Rank.MAN),
    "L": (Color.LIGHT, Rank.KING),
    "d": (Color.DARK, Rank.MAN),
    "D": (Color.DARK, Rank.KING),
}

_UNICODE: dict[tuple[Color, Rank], str] = {
    (Color.LIGHT, Rank.MAN): "⛀",
    (Color.LIGHT, Rank.KING): "⛁",
    (Color.DARK, Rank.MAN): "⛂",
    (Color.DARK, Rank.KING): "⛃",
}

_CHARS: dict[tuple[Color, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece."""

    color: Color
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def promoted(self) -> Piece:
        """The king of the same color (a king stays a king)."""
        if self.is_king:
            return self
        return Piece(self.color, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board-text character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.color, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from board-text character, e.g. 'D' -> dark king."""
        try:
            color, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, rank)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛃."""
        return _UNICODE[(self.color, self.rank)]
