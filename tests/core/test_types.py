"""Tests for square helpers, enums and pieces."""

import pytest

from checkie.core.enums import Color, GameResult, Rank
from checkie.core.errors import CheckersError, InvalidPosition
from checkie.core.piece import Piece
from checkie.core.types import (
    DIAGONAL_RAYS,
    is_playable,
    make_square,
    parse_square,
    square_from_number,
    square_name,
    square_number,
)


class TestSquares:
    def test_names(self) -> None:
        assert square_name((7, 0)) == "a1"
        assert square_name((0, 7)) == "h8"
        assert parse_square("c3") == (5, 2)

    def test_bad_name(self) -> None:
        with pytest.raises(InvalidPosition):
            parse_square("z9")

    def test_make_square_rejects_off_board(self) -> None:
        assert make_square(0, 7) == (0, 7)
        with pytest.raises(InvalidPosition):
            make_square(0, 8)

    def test_numbering_covers_playable_squares(self) -> None:
        squares = [square_from_number(n) for n in range(1, 33)]
        assert len(set(squares)) == 32
        assert all(is_playable(sq) for sq in squares)
        assert [square_number(sq) for sq in squares] == list(range(1, 33))
        assert square_from_number(1) == (0, 1)
        assert square_from_number(32) == (7, 6)

    def test_non_playable_square_has_no_number(self) -> None:
        with pytest.raises(InvalidPosition):
            square_number((0, 0))

    def test_rays_are_nearest_first(self) -> None:
        up_right = DIAGONAL_RAYS[(7, 0)][1]
        assert up_right == ((6, 1), (5, 2), (4, 3), (3, 4), (2, 5), (1, 6), (0, 7))
        assert DIAGONAL_RAYS[(7, 0)][0] == ()


class TestEnums:
    def test_color_geometry(self) -> None:
        assert Color.LIGHT.opposite == Color.DARK
        assert Color.LIGHT.forward == -1
        assert Color.DARK.promotion_row == 7

    @pytest.mark.parametrize(
        ("name", "color"),
        [("light", Color.LIGHT), ("White", Color.LIGHT), ("dark", Color.DARK), ("black", Color.DARK)],
    )
    def test_color_parse(self, name: str, color: Color) -> None:
        assert Color.parse(name) == color

    def test_color_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("red")

    def test_win_for(self) -> None:
        assert GameResult.win_for(Color.DARK) == GameResult.DARK_WINS

    def test_errors_carry_kind(self) -> None:
        err = InvalidPosition("off board")
        assert isinstance(err, CheckersError)
        assert isinstance(err, ValueError)
        assert err.kind == "invalid_position"


class TestPiece:
    def test_chars(self) -> None:
        assert str(Piece(Color.LIGHT)) == "l"
        assert str(Piece(Color.DARK, Rank.KING)) == "D"
        assert Piece.from_char("L") == Piece(Color.LIGHT, Rank.KING)

    def test_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_promoted(self) -> None:
        assert Piece(Color.DARK).promoted().is_king
