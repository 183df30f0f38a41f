"""Data-contract codec for transport collaborators.

Board: 8x8 grid whose cells are ``None`` or ``{"color": ..., "isKing": ...}``.
Move: ``{"from": [r, c], "to": [r, c], "capturedSequence": [[r, c], ...]}``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.errors import InvalidRequest, MalformedBoard
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, make_square

Cell = Mapping[str, Any] | None


def board_from_cells(cells: Sequence[Sequence[Cell]]) -> Board:
    """Decode a contract grid into a :class:`Board`."""
    if isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
        raise MalformedBoard("Board must be a sequence of rows")
    if len(cells) != BOARD_SIZE:
        raise MalformedBoard(f"Board must have {BOARD_SIZE} rows, got {len(cells)}")

    rows: list[list[Piece | None]] = []
    for row_idx, row in enumerate(cells):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MalformedBoard(f"Row {row_idx} is not a sequence")
        if len(row) != BOARD_SIZE:
            raise MalformedBoard(
                f"Row {row_idx} must have {BOARD_SIZE} cells, got {len(row)}"
            )
        rows.append([_piece_from_cell(cell, (row_idx, col)) for col, cell in enumerate(row)])
    return Board(rows)


def _piece_from_cell(cell: Cell, sq: Square) -> Piece | None:
    if cell is None:
        return None
    if not isinstance(cell, Mapping):
        raise MalformedBoard(f"Invalid cell at {sq}: {cell!r}")
    color_name = cell.get("color")
    is_king = cell.get("isKing", False)
    if not isinstance(color_name, str) or not isinstance(is_king, bool):
        raise MalformedBoard(f"Invalid cell at {sq}: {dict(cell)!r}")
    try:
        color = Color.parse(color_name)
    except ValueError:
        raise MalformedBoard(f"Invalid cell color at {sq}: {color_name!r}") from None
    return Piece(color, Rank.KING if is_king else Rank.MAN)


def board_to_cells(board: Board) -> list[list[dict[str, Any] | None]]:
    """Encode *board* as a contract grid."""
    return [
        [
            None if piece is None else {"color": str(piece.color), "isKing": piece.is_king}
            for piece in row
        ]
        for row in board.rows
    ]


def square_from_value(value: object) -> Square:
    """Decode a ``[row, col]`` pair, raising on off-board coordinates."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
        raise InvalidRequest(f"Square must be a [row, col] pair: {value!r}")
    row, col = value
    if isinstance(row, bool) or isinstance(col, bool):
        raise InvalidRequest(f"Square coordinates must be integers: {value!r}")
    if not isinstance(row, int) or not isinstance(col, int):
        raise InvalidRequest(f"Square coordinates must be integers: {value!r}")
    return make_square(row, col)


def move_to_dict(move: Move) -> dict[str, Any]:
    """Encode *move* as a contract mapping."""
    return {
        "from": list(move.from_sq),
        "to": list(move.to_sq),
        "capturedSequence": [list(sq) for sq in move.captured],
    }


def move_from_dict(data: Mapping[str, Any]) -> Move:
    """Decode a contract mapping into a :class:`Move`."""
    if not isinstance(data, Mapping):
        raise InvalidRequest(f"Move must be a mapping: {data!r}")
    try:
        raw_from = data["from"]
        raw_to = data["to"]
    except KeyError as exc:
        raise InvalidRequest(f"Move is missing {exc.args[0]!r}") from None
    raw_captured = data.get("capturedSequence") or []
    if isinstance(raw_captured, (str, bytes)) or not isinstance(raw_captured, Sequence):
        raise InvalidRequest(f"capturedSequence must be a list: {raw_captured!r}")

    captured = tuple(square_from_value(item) for item in raw_captured)
    if len(set(captured)) != len(captured):
        raise InvalidRequest("capturedSequence repeats a square")
    return Move(square_from_value(raw_from), square_from_value(raw_to), captured)
