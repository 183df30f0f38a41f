"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, Rules

    board = Board.initial()
    for move in Rules.legal_moves(board, Color.LIGHT):
        print(move)
"""

from checkie.core.board import Board
from checkie.core.contract import (
    board_from_cells,
    board_to_cells,
    move_from_dict,
    move_to_dict,
)
from checkie.core.enums import Color, GameResult, Rank
from checkie.core.errors import (
    CheckersError,
    IllegalMove,
    InvalidPosition,
    InvalidRequest,
    MalformedBoard,
)
from checkie.core.jump_chain import jump_chains
from checkie.core.move import Move
from checkie.core.move_generator import DEFAULT_VARIANT, MoveGenerator, Variant
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
from checkie.core.simulator import apply_move
from checkie.core.types import (
    Square,
    make_square,
    parse_square,
    square_from_number,
    square_name,
    square_number,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "Rank",
    # Errors
    "CheckersError",
    "IllegalMove",
    "InvalidPosition",
    "InvalidRequest",
    "MalformedBoard",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_from_number",
    "square_name",
    "square_number",
    # Domain objects
    "Board",
    "DEFAULT_VARIANT",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Variant",
    "apply_move",
    "jump_chains",
    # Notation / contract
    "STARTING_FEN",
    "board_from_cells",
    "board_from_fen",
    "board_to_cells",
    "board_to_fen",
    "describe_position",
    "move_from_dict",
    "move_to_dict",
    "move_to_text",
    "parse_move",
]
