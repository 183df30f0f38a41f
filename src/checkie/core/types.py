"""Square type alias and coordinate helpers.

Board layout (row 0 at the top, Dark's home side)::

    row 0:  a8 .. h8
    ...
    row 7:  a1 .. h1

Playable squares are those with ``row + col`` odd. PDN numbering runs 1-32
over the playable squares, row by row from row 0.
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.errors import InvalidPosition

Square: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is a ``(row, col)`` pair inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    if isinstance(row, bool) or isinstance(col, bool):
        return False
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def make_square(row: int, col: int) -> Square:
    """Create a square, rejecting off-board coordinates."""
    sq = (row, col)
    if not is_valid_square(sq):
        raise InvalidPosition(f"Square out of range: {sq!r}")
    return sq


def is_playable(sq: Square) -> bool:
    """Whether *sq* is one of the 32 squares pieces normally occupy."""
    return (sq[0] + sq[1]) % 2 == 1


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. (7, 0) -> 'a1', (0, 7) -> 'h8'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'c3' -> (5, 2)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise InvalidPosition(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def square_number(sq: Square) -> int:
    """PDN number (1-32) of a playable square."""
    if not is_valid_square(sq) or not is_playable(sq):
        raise InvalidPosition(f"Not a playable square: {sq!r}")
    row, col = sq
    return row * 4 + col // 2 + 1


def square_from_number(number: int) -> Square:
    """Inverse of :func:`square_number`."""
    if not 1 <= number <= 32:
        raise InvalidPosition(f"Square number out of range: {number!r}")
    row, offset = divmod(number - 1, 4)
    col = offset * 2 + (1 if row % 2 == 0 else 0)
    return (row, col)


def _build_rays() -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in DIAGONALS:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            rays[(row, col)] = tuple(square_rays)
    return rays


# square -> one ray per entry of DIAGONALS, nearest square first.
DIAGONAL_RAYS = _build_rays()
