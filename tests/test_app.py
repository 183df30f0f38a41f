"""Tests for the command-line entry point."""

import pytest

from checkie.app import main


class TestCli:
    def test_moves_lists_opening(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 7
        assert "c3-d4" in lines

    def test_moves_without_legal_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves", "L:L:D1"]) == 0
        assert "light has no legal moves" in capsys.readouterr().out

    def test_best(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["best", "--depth", "1", "--seed", "4"]) == 0
        out = capsys.readouterr().out
        assert "score=" in out
        assert "nodes=" in out

    def test_describe(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["describe", "D:L21:D12"]) == 0
        out = capsys.readouterr().out
        assert "side_to_move: dark" in out
        assert "moves:" in out

    def test_selfplay(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["selfplay", "--depth", "1", "--max-plies", "4", "--seed", "2"]) == 0
        out = capsys.readouterr().out
        assert "  1. light: " in out
        assert "  2. dark: " in out
        assert "Stopped after 4 plies" in out

    def test_bad_fen_reports_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves", "nonsense"]) == 2
        assert "malformed_board" in capsys.readouterr().err

    def test_bad_depth_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["best", "--depth", "0"])
