"""Tests for FEN, move text and position descriptions."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.errors import IllegalMove, MalformedBoard
from checkie.core.move import Move
from checkie.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    describe_position,
    move_to_text,
    parse_move,
)
from checkie.core.piece import Piece
from checkie.core.rules import Rules


class TestFen:
    def test_starting_fen_is_initial_board(self) -> None:
        board, side = board_from_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.LIGHT

    def test_initial_board_serializes_to_starting_fen(self) -> None:
        assert board_to_fen(Board.initial(), Color.LIGHT) == STARTING_FEN

    def test_kings_and_ranges(self) -> None:
        board, side = board_from_fen("D:LK30:D1-3")
        assert side == Color.DARK
        assert board[(7, 2)] == Piece(Color.LIGHT, Rank.KING)
        assert board.pieces(Color.DARK) == [(0, 1), (0, 3), (0, 5)]

    def test_empty_color_field(self) -> None:
        board, _ = board_from_fen("L:L21:D")
        assert board.count(Color.DARK) == 0
        assert board_to_fen(board, Color.LIGHT) == "L:L21:D"

    def test_king_round_trip(self) -> None:
        fen = "D:L5,K30:DK1,12"
        board, side = board_from_fen(fen)
        assert board_to_fen(board, side) == fen

    @pytest.mark.parametrize(
        "fen",
        [
            "L:L21",
            "X:L21:D1",
            "L:L33:D1",
            "L:L21:L22",
            "L:L1:D1",
            "L:Lx:D1",
            "L:L5-3:D1",
        ],
    )
    def test_malformed_fen(self, fen: str) -> None:
        with pytest.raises(MalformedBoard):
            board_from_fen(fen)

    def test_piece_off_playable_square_has_no_fen(self) -> None:
        board = Board().replace({(0, 0): Piece(Color.DARK)})
        with pytest.raises(MalformedBoard):
            board_to_fen(board, Color.LIGHT)


class TestMoveText:
    def test_simple_move_text(self) -> None:
        assert move_to_text(Move((5, 2), (4, 3))) == "c3-d4"

    def test_chain_text_uses_path(self) -> None:
        move = Move((5, 0), (1, 4), ((4, 1), (2, 3)), ((3, 2), (1, 4)))
        assert move_to_text(move) == "a3xc5xe7"

    def test_parse_full_text(self) -> None:
        legal = Rules.legal_moves(Board.initial(), Color.LIGHT)
        assert parse_move("c3-d4", legal) == Move((5, 2), (4, 3))

    def test_parse_short_capture(self) -> None:
        chain = Move((5, 0), (1, 4), ((4, 1), (2, 3)), ((3, 2), (1, 4)))
        assert parse_move("A3xE7", [chain]) is chain

    def test_parse_ambiguous_short_form(self) -> None:
        first = Move((5, 0), (1, 4), ((4, 1), (2, 3)), ((3, 2), (1, 4)))
        second = Move((5, 0), (1, 4), ((4, 1), (2, 1)), ((3, 2), (1, 0), (1, 4)))
        with pytest.raises(IllegalMove, match="Ambiguous"):
            parse_move("a3xe7", [first, second])

    def test_parse_illegal(self) -> None:
        legal = Rules.legal_moves(Board.initial(), Color.LIGHT)
        with pytest.raises(IllegalMove):
            parse_move("c3-c4", legal)


class TestDescribePosition:
    def test_opening_description(self) -> None:
        board = Board.initial()
        text = describe_position(board, Color.LIGHT, Rules.legal_moves(board, Color.LIGHT))
        assert text.startswith("side_to_move: light\n")
        assert "light_pieces: 12" in text
        assert "dark_pieces: 12" in text
        assert "1. a3-b4" in text
        assert "  a b c d e f g h" in text

    def test_captures_are_listed(self) -> None:
        move = Move((4, 3), (2, 5), ((3, 4),), ((2, 5),))
        text = describe_position(Board(), Color.LIGHT, [move])
        assert "1. d4xf6 (captures e5)" in text

    def test_no_moves(self) -> None:
        text = describe_position(Board(), Color.DARK, [])
        assert text.splitlines()[-1] == "(none)"
