"""Tests for the transport data-contract codec."""

import pytest

from checkie.core.board import Board
from checkie.core.contract import (
    board_from_cells,
    board_to_cells,
    move_from_dict,
    move_to_dict,
    square_from_value,
)
from checkie.core.enums import Color, Rank
from checkie.core.errors import InvalidPosition, InvalidRequest, MalformedBoard
from checkie.core.move import Move
from checkie.core.piece import Piece


def _empty_cells() -> list[list[dict[str, object] | None]]:
    return [[None] * 8 for _ in range(8)]


class TestBoardCells:
    def test_initial_round_trip(self) -> None:
        board = Board.initial()
        assert board_from_cells(board_to_cells(board)) == board

    def test_cell_encoding(self) -> None:
        board = Board().replace({(7, 2): Piece(Color.LIGHT, Rank.KING)})
        cells = board_to_cells(board)
        assert cells[7][2] == {"color": "light", "isKing": True}
        assert cells[0][1] is None

    def test_is_king_defaults_to_false(self) -> None:
        cells = _empty_cells()
        cells[2][1] = {"color": "dark"}
        assert board_from_cells(cells)[(2, 1)] == Piece(Color.DARK)

    @pytest.mark.parametrize(
        "cell",
        [
            "d",
            {"color": "blue", "isKing": False},
            {"color": "light", "isKing": "yes"},
            {"isKing": True},
        ],
    )
    def test_invalid_cell(self, cell: object) -> None:
        cells: list[list[object]] = [[None] * 8 for _ in range(8)]
        cells[3][2] = cell
        with pytest.raises(MalformedBoard):
            board_from_cells(cells)  # type: ignore[arg-type]

    def test_wrong_shape(self) -> None:
        with pytest.raises(MalformedBoard):
            board_from_cells(_empty_cells()[:7])
        with pytest.raises(MalformedBoard):
            board_from_cells([[None] * 7 for _ in range(8)])
        with pytest.raises(MalformedBoard):
            board_from_cells("not a board")  # type: ignore[arg-type]


class TestMoveDict:
    def test_encode(self) -> None:
        move = Move((4, 1), (0, 5), ((3, 2), (1, 4)), ((2, 3), (0, 5)))
        assert move_to_dict(move) == {
            "from": [4, 1],
            "to": [0, 5],
            "capturedSequence": [[3, 2], [1, 4]],
        }

    def test_decode(self) -> None:
        data = {"from": [4, 1], "to": [0, 5], "capturedSequence": [[3, 2], [1, 4]]}
        assert move_from_dict(data) == Move((4, 1), (0, 5), ((3, 2), (1, 4)))

    def test_captured_sequence_is_optional(self) -> None:
        assert move_from_dict({"from": [5, 2], "to": [4, 3]}) == Move((5, 2), (4, 3))

    def test_missing_key(self) -> None:
        with pytest.raises(InvalidRequest):
            move_from_dict({"from": [5, 2]})

    def test_repeated_capture(self) -> None:
        data = {"from": [7, 0], "to": [3, 4], "capturedSequence": [[5, 2], [5, 2]]}
        with pytest.raises(InvalidRequest):
            move_from_dict(data)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidRequest):
            move_from_dict([[5, 2], [4, 3]])  # type: ignore[arg-type]


class TestSquareValue:
    def test_valid(self) -> None:
        assert square_from_value([3, 4]) == (3, 4)

    def test_off_board(self) -> None:
        with pytest.raises(InvalidPosition):
            square_from_value([8, 1])

    @pytest.mark.parametrize("value", ["a1", [1], [1, 2, 3], [True, 1], [1.0, 2]])
    def test_bad_shape(self, value: object) -> None:
        with pytest.raises(InvalidRequest):
            square_from_value(value)
