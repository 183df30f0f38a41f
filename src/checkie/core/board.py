"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from checkie.core.enums import Color
from checkie.core.errors import InvalidPosition, MalformedBoard
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, is_valid_square, square_name

Row = tuple[Piece | None, ...]

_EMPTY_ROW: Row = (None,) * BOARD_SIZE


class Board:
    """Immutable 8x8 board value.

    Updates never touch the receiver: :meth:`replace` builds a new board that
    shares every unchanged row with its parent, so search branches can keep
    their ancestors without copying the whole grid.
    """

    __slots__ = ("_rows", "_hash")

    def __init__(self, rows: Iterable[Iterable[Piece | None]] | None = None) -> None:
        if rows is None:
            self._rows: tuple[Row, ...] = (_EMPTY_ROW,) * BOARD_SIZE
        else:
            self._rows = self._validated_rows(rows)
        self._hash: int | None = None

    @staticmethod
    def _validated_rows(rows: Iterable[Iterable[Piece | None]]) -> tuple[Row, ...]:
        try:
            built = tuple(tuple(row) for row in rows)
        except TypeError:
            raise MalformedBoard("Board rows must be iterables of cells") from None
        if len(built) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in built):
            raise MalformedBoard(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for row in built:
            for cell in row:
                if cell is not None and not isinstance(cell, Piece):
                    raise MalformedBoard(f"Invalid board cell: {cell!r}")
        return built

    @classmethod
    def _from_rows(cls, rows: tuple[Row, ...]) -> Board:
        board = cls.__new__(cls)
        board._rows = rows
        board._hash = None
        return board

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise InvalidPosition(f"Square out of range: {sq!r}")
        row, col = sq
        return self._rows[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs in row-major order."""
        for row_idx, row in enumerate(self._rows):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    yield (row_idx, col_idx), piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return sum(1 for _, piece in self.occupied() if piece.color == color)

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied; untouched rows are shared."""
        by_row: dict[int, dict[int, Piece | None]] = {}
        for sq, piece in changes.items():
            if not is_valid_square(sq):
                raise InvalidPosition(f"Square out of range: {sq!r}")
            by_row.setdefault(sq[0], {})[sq[1]] = piece

        rows = list(self._rows)
        for row_idx, cols in by_row.items():
            cells = list(rows[row_idx])
            for col_idx, piece in cols.items():
                cells[col_idx] = piece
            rows[row_idx] = tuple(cells)
        return Board._from_rows(tuple(rows))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard opening layout: Dark on rows 0-2, Light on rows 5-7."""
        rows: list[Row] = []
        for row in range(BOARD_SIZE):
            if row < 3:
                color: Color | None = Color.DARK
            elif row >= BOARD_SIZE - 3:
                color = Color.LIGHT
            else:
                color = None
            rows.append(
                tuple(
                    Piece(color) if color is not None and (row + col) % 2 == 1 else None
                    for col in range(BOARD_SIZE)
                )
            )
        return cls._from_rows(tuple(rows))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._rows)
        return self._hash

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{square_name((row_idx, 0))[1]} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
