"""Game state machine: board, turn, pending jump chain and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.errors import IllegalMove, MalformedBoard
from checkie.core.move import Move
from checkie.core.move_generator import DEFAULT_VARIANT, Variant
from checkie.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    move_to_text,
)
from checkie.core.rules import Rules
from checkie.core.simulator import apply_move
from checkie.core.types import Square
from checkie.game.interfaces import GamePhase


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    text: str
    side: Color
    board_before: Board
    board_after: Board

    @property
    def was_capture(self) -> bool:
        return self.move.is_capture


@dataclass(frozen=True)
class PendingChain:
    """A jump chain whose first steps have been played."""

    origin: Square
    landings: tuple[Square, ...]
    captured: tuple[Square, ...]
    candidates: tuple[Move, ...]
    board_before: Board

    @property
    def current(self) -> Square:
        return self.landings[-1]


@dataclass
class GameState:
    """Explicit session value: everything a turn needs, nothing ambient.

    This is a pure data/logic class with no threading and no UI. Boards are
    immutable, so history entries keep their snapshots for free.
    """

    variant: Variant = DEFAULT_VARIANT
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.LIGHT, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    pending_chain: PendingChain | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    # None when the start board has a piece on a square without a PDN number.
    start_fen: str | None = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        fen: str | None = None,
        *,
        board: Board | None = None,
        side_to_move: Color = Color.LIGHT,
    ) -> None:
        """Initialise (or reset) the game from a FEN, a board, or the opening."""
        if fen is not None:
            self.board, self.side_to_move = board_from_fen(fen)
            self.start_fen = fen
        else:
            self.board = board if board is not None else Board.initial()
            self.side_to_move = side_to_move
            self.start_fen = _fen_or_none(self.board, side_to_move)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.pending_chain = None
        self.move_history.clear()
        self._check_game_over()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves now; single next jumps while a chain is pending."""
        if self.is_game_over:
            return []
        if self.pending_chain is not None:
            return self._next_steps(self.pending_chain)
        return Rules.legal_moves(self.board, self.side_to_move, self.variant)

    def moves_for_piece(self, sq: Square) -> list[Move]:
        return [m for m in self.legal_moves() if m.from_sq == sq]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of completed turns."""
        return len(self.move_history)

    @property
    def fen(self) -> str | None:
        return _fen_or_none(self.board, self.side_to_move)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Play a complete move (a whole jump chain for captures)."""
        self._require_playable()
        if self.pending_chain is not None:
            raise IllegalMove("A jump chain is in progress; continue it with apply_step")

        legal = Rules.legal_moves(self.board, self.side_to_move, self.variant)
        if move not in legal:
            raise IllegalMove(f"Illegal move for {self.side_to_move}: {move}")
        chosen = legal[legal.index(move)]
        return self._finish(chosen, self.board, apply_move(self.board, chosen))

    def apply_step(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Play one step of a turn.

        Returns the history record once the turn is complete, or ``None`` while
        the same piece still has to keep capturing.
        """
        self._require_playable()
        pending = self.pending_chain
        if pending is None:
            step_index = 0
            legal = Rules.legal_moves(self.board, self.side_to_move, self.variant)
            candidates = [
                m for m in legal if m.from_sq == from_sq and m.landings[0] == to_sq
            ]
            board_before = self.board
            landings: tuple[Square, ...] = ()
            captured: tuple[Square, ...] = ()
        else:
            if from_sq != pending.current:
                raise IllegalMove(f"The piece on {pending.current} must keep capturing")
            step_index = len(pending.landings)
            candidates = [m for m in pending.candidates if m.landings[step_index] == to_sq]
            board_before = pending.board_before
            landings = pending.landings
            captured = pending.captured

        if not candidates:
            raise IllegalMove(f"Illegal step {from_sq} -> {to_sq}")

        first = candidates[0]
        if not first.is_capture:
            return self._finish(first, board_before, apply_move(self.board, first))

        jumped = first.captured[step_index]
        step = Move(from_sq, to_sq, (jumped,), (to_sq,))
        board_after = apply_move(self.board, step)
        landings += (to_sq,)
        captured += (jumped,)

        finished = [m for m in candidates if len(m.landings) == len(landings)]
        if finished:
            return self._finish(finished[0], board_before, board_after)

        self.board = board_after
        self.pending_chain = PendingChain(
            origin=first.from_sq,
            landings=landings,
            captured=captured,
            candidates=tuple(candidates),
            board_before=board_before,
        )
        self.phase = GamePhase.MID_CAPTURE
        return None

    def undo_last_move(self) -> Move | None:
        """Undo the last turn. Returns the undone Move, or None if empty.

        A partly played jump chain is rolled back first; that also returns
        ``None``.
        """
        if self.pending_chain is not None:
            self.board = self.pending_chain.board_before
            self.pending_chain = None
            self.phase = GamePhase.AWAITING_MOVE
            return None
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board = record.board_before
        self.side_to_move = record.side
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        return record.move

    def resign(self, color: Color) -> None:
        self.result = GameResult.win_for(color.opposite)
        self.pending_chain = None
        self.phase = GamePhase.GAME_OVER

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_playable(self) -> None:
        if self.phase == GamePhase.NOT_STARTED:
            raise IllegalMove("Game has not started")
        if self.is_game_over:
            raise IllegalMove("Game is over")

    def _next_steps(self, pending: PendingChain) -> list[Move]:
        step_index = len(pending.landings)
        steps: list[Move] = []
        for chain in pending.candidates:
            landing = chain.landings[step_index]
            step = Move(pending.current, landing, (chain.captured[step_index],), (landing,))
            if step not in steps:
                steps.append(step)
        return steps

    def _finish(self, move: Move, board_before: Board, board_after: Board) -> MoveRecord:
        record = MoveRecord(
            move=move,
            text=move_to_text(move),
            side=self.side_to_move,
            board_before=board_before,
            board_after=board_after,
        )
        self.move_history.append(record)
        self.board = board_after
        self.side_to_move = self.side_to_move.opposite
        self.pending_chain = None
        self.phase = GamePhase.AWAITING_MOVE
        self._check_game_over()
        return record

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move, self.variant)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER


def _fen_or_none(board: Board, side: Color) -> str | None:
    try:
        return board_to_fen(board, side)
    except MalformedBoard:
        return None
