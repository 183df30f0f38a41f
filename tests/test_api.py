"""Tests for the boundary API."""

import random

import pytest

from checkie.api import (
    Reply,
    compute_best_move,
    list_legal_moves,
    list_moves_for_piece,
    play_move,
)
from checkie.config import Config, RulesConfig, SearchConfig
from checkie.core.board import Board
from checkie.core.contract import board_to_cells
from checkie.core.enums import Color
from checkie.core.errors import IllegalMove, InvalidRequest
from checkie.core.move import Move
from checkie.core.piece import Piece


class TestReply:
    def test_ok_value(self) -> None:
        reply: Reply[int] = Reply(value=3)
        assert reply.ok
        assert reply.unwrap() == 3

    def test_error_reraises(self) -> None:
        reply: Reply[int] = Reply(error=InvalidRequest("bad"))
        assert not reply.ok
        with pytest.raises(InvalidRequest):
            reply.unwrap()


class TestListLegalMoves:
    def test_accepts_contract_grid(self) -> None:
        reply = list_legal_moves(board_to_cells(Board.initial()), "light")
        assert reply.ok
        assert len(reply.unwrap()) == 7

    def test_accepts_domain_values(self) -> None:
        reply = list_legal_moves(Board.initial(), Color.DARK)
        assert len(reply.unwrap()) == 7

    def test_bad_side(self) -> None:
        reply = list_legal_moves(Board.initial(), "green")
        assert reply.error is not None
        assert reply.error.kind == "invalid_request"

    def test_malformed_board(self) -> None:
        reply = list_legal_moves([[None] * 8] * 3, "light")
        assert reply.error is not None
        assert reply.error.kind == "malformed_board"

    def test_backward_capture_from_config(self) -> None:
        board = Board().replace({(4, 3): Piece(Color.LIGHT), (5, 2): Piece(Color.DARK)})
        config = Config(rules=RulesConfig(men_capture_backward=True))
        reply = list_legal_moves(board, "light", config=config)
        assert reply.unwrap() == [Move((4, 3), (6, 1), ((5, 2),))]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="checkie.api"):
            list_legal_moves(Board.initial(), "green")
        assert "list_legal_moves rejected (invalid_request)" in caplog.text


class TestListMovesForPiece:
    def test_piece_moves(self) -> None:
        reply = list_moves_for_piece(Board.initial(), [5, 2], "light")
        assert {m.to_sq for m in reply.unwrap()} == {(4, 1), (4, 3)}

    def test_off_board_position(self) -> None:
        reply = list_moves_for_piece(Board.initial(), [9, 0], "light")
        assert reply.error is not None
        assert reply.error.kind == "invalid_position"

    def test_bad_position_shape(self) -> None:
        reply = list_moves_for_piece(Board.initial(), "c3", "light")  # type: ignore[arg-type]
        assert reply.error is not None
        assert reply.error.kind == "invalid_request"


class TestComputeBestMove:
    def test_returns_legal_move(self) -> None:
        board = Board.initial()
        reply = compute_best_move(board, "light", 2, rng=random.Random(1))
        assert reply.unwrap() in list_legal_moves(board, "light").unwrap()

    def test_no_pieces_gives_none(self) -> None:
        board = Board().replace({(2, 1): Piece(Color.DARK)})
        reply = compute_best_move(board, "light", 3)
        assert reply.ok
        assert reply.value is None

    @pytest.mark.parametrize("depth", [0, -1, True])
    def test_bad_depth(self, depth: int) -> None:
        reply = compute_best_move(Board.initial(), "light", depth)
        assert reply.error is not None
        assert reply.error.kind == "invalid_request"

    @pytest.mark.parametrize("limit", ["100", 1.5, False])
    def test_bad_time_limit(self, limit: object) -> None:
        reply = compute_best_move(Board.initial(), "light", 2, time_limit_ms=limit)  # type: ignore[arg-type]
        assert reply.error is not None
        assert reply.error.kind == "invalid_request"

    def test_config_seed_is_reproducible(self) -> None:
        config = Config(search=SearchConfig(depth=2, seed=11))
        first = compute_best_move(Board.initial(), "dark", config=config)
        second = compute_best_move(Board.initial(), "dark", config=config)
        assert first.unwrap() == second.unwrap()


class TestPlayMove:
    def test_plays_contract_move(self) -> None:
        reply = play_move(board_to_cells(Board.initial()), "light", {"from": [5, 2], "to": [4, 3]})
        board = reply.unwrap()
        assert board[(4, 3)] == Piece(Color.LIGHT)
        assert board[(5, 2)] is None

    def test_illegal_move(self) -> None:
        reply = play_move(Board.initial(), "light", Move((5, 2), (3, 4)))
        assert isinstance(reply.error, IllegalMove)
        with pytest.raises(IllegalMove):
            reply.unwrap()

    def test_capture_must_match_sequence(self) -> None:
        board = Board().replace(
            {(4, 1): Piece(Color.LIGHT), (3, 2): Piece(Color.DARK), (1, 4): Piece(Color.DARK)}
        )
        partial = {"from": [4, 1], "to": [2, 3], "capturedSequence": [[3, 2]]}
        assert not play_move(board, "light", partial).ok

        full = {"from": [4, 1], "to": [0, 5], "capturedSequence": [[3, 2], [1, 4]]}
        after = play_move(board, "light", full).unwrap()
        assert after.count(Color.DARK) == 0
        assert after[(0, 5)] is not None and after[(0, 5)].is_king
