"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum

_COLOR_ALIASES: dict[str, int] = {
    "light": 0,
    "white": 0,
    "dark": 1,
    "black": 1,
}


class Color(IntEnum):
    """Side color. LIGHT starts on rows 5-7 and moves first."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's forward step."""
        return -1 if self is Color.LIGHT else 1

    @property
    def promotion_row(self) -> int:
        """Row on which a man of this color becomes a king."""
        return 0 if self is Color.LIGHT else 7

    @classmethod
    def parse(cls, name: str) -> Color:
        """Color from its name, e.g. ``"light"`` or the alias ``"black"``."""
        try:
            return cls(_COLOR_ALIASES[name.strip().lower()])
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid color name: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. Only MAN -> KING transitions exist."""

    MAN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.LIGHT_WINS if color == Color.LIGHT else cls.DARK_WINS
