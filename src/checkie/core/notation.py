"""Text notation: PDN-style FEN boards, move text and assistant descriptions.

FEN layout::

    L:L21,22,K30:D1,2,3

The first field is the side to move, followed by one field per color listing
PDN square numbers; a ``K`` prefix marks a king and ``a-b`` denotes a range.
"""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.errors import IllegalMove, InvalidPosition, MalformedBoard
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import (
    Square,
    is_playable,
    square_from_number,
    square_name,
    square_number,
)

STARTING_FEN = (
    "L:L21,22,23,24,25,26,27,28,29,30,31,32:D1,2,3,4,5,6,7,8,9,10,11,12"
)

_COLOR_TAGS: dict[str, Color] = {"L": Color.LIGHT, "D": Color.DARK}
_TAG_OF: dict[Color, str] = {v: k for k, v in _COLOR_TAGS.items()}

_LEGEND = "l=light man, L=light king, d=dark man, D=dark king, .=empty"


# ── FEN ──────────────────────────────────────────────────────────────────────


def board_from_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into a board and the side to move."""
    parts = fen.strip().split(":")
    if len(parts) != 3:
        raise MalformedBoard(f"Invalid FEN (need 3 fields): {fen!r}")

    side = _COLOR_TAGS.get(parts[0].strip().upper())
    if side is None:
        raise MalformedBoard(f"Invalid FEN side-to-move field: {parts[0]!r}")

    placed: dict[Square, Piece] = {}
    seen_colors: set[Color] = set()
    for field_text in parts[1:]:
        field_text = field_text.strip()
        color = _COLOR_TAGS.get(field_text[:1].upper())
        if color is None or color in seen_colors:
            raise MalformedBoard(f"Invalid FEN color field: {field_text!r}")
        seen_colors.add(color)

        body = field_text[1:]
        if not body:
            continue
        for token in body.split(","):
            for sq, rank in _parse_token(token.strip(), fen):
                if sq in placed:
                    raise MalformedBoard(f"Square listed twice in FEN: {fen!r}")
                placed[sq] = Piece(color, rank)

    return Board().replace(placed), side


def _parse_token(token: str, fen: str) -> list[tuple[Square, Rank]]:
    rank = Rank.MAN
    if token[:1].upper() == "K":
        rank = Rank.KING
        token = token[1:]
    try:
        if "-" in token:
            low_text, high_text = token.split("-", 1)
            low, high = int(low_text), int(high_text)
            if low > high:
                raise ValueError(token)
            numbers = range(low, high + 1)
        else:
            numbers = range(int(token), int(token) + 1)
        return [(square_from_number(n), rank) for n in numbers]
    except (ValueError, InvalidPosition):
        raise MalformedBoard(f"Invalid FEN square {token!r}: {fen!r}") from None


def board_to_fen(board: Board, side_to_move: Color) -> str:
    """Serialize *board* with *side_to_move* into FEN."""
    fields: list[str] = [_TAG_OF[side_to_move]]
    for color in (Color.LIGHT, Color.DARK):
        tokens: list[str] = []
        for sq in sorted(board.pieces(color), key=_number_or_fail):
            piece = board[sq]
            assert piece is not None
            prefix = "K" if piece.is_king else ""
            tokens.append(f"{prefix}{square_number(sq)}")
        fields.append(_TAG_OF[color] + ",".join(tokens))
    return ":".join(fields)


def _number_or_fail(sq: Square) -> int:
    if not is_playable(sq):
        raise MalformedBoard(f"Piece on non-playable square {sq!r} has no FEN form")
    return square_number(sq)


# ── Moves ────────────────────────────────────────────────────────────────────


def move_to_text(move: Move) -> str:
    """Move text, e.g. 'c3-d4' or 'a3xc5xe7'."""
    return str(move)


def parse_move(text: str, legal_moves: Iterable[Move]) -> Move:
    """Find the legal move written as *text*.

    Besides the full landing list, a capture may be given as just its start
    and end square (``'a3xe7'``) when that is unambiguous.
    """
    wanted = text.strip().lower()
    short_matches: list[Move] = []
    for move in legal_moves:
        if move_to_text(move) == wanted:
            return move
        sep = "x" if move.is_capture else "-"
        if f"{square_name(move.from_sq)}{sep}{square_name(move.to_sq)}" == wanted:
            short_matches.append(move)

    if len(short_matches) == 1:
        return short_matches[0]
    if not short_matches:
        raise IllegalMove(f"Illegal move: {text}")
    raise IllegalMove(f"Ambiguous move: {text} -> {[str(m) for m in short_matches]}")


# ── Assistant text ───────────────────────────────────────────────────────────


def describe_position(board: Board, side: Color, moves: Iterable[Move]) -> str:
    """Plain structured text of a position and its candidate moves.

    Meant as input for an external commentary/suggestion service; the engine
    does not depend on how that text is consumed.
    """
    lines = [
        f"side_to_move: {side}",
        f"light_pieces: {board.count(Color.LIGHT)}",
        f"dark_pieces: {board.count(Color.DARK)}",
        "board:",
        repr(board),
        f"legend: {_LEGEND}",
        "moves:",
    ]
    listed = list(moves)
    if not listed:
        lines.append("(none)")
    for idx, move in enumerate(listed, start=1):
        entry = f"{idx}. {move_to_text(move)}"
        if move.is_capture:
            taken = ", ".join(square_name(sq) for sq in move.captured)
            entry += f" (captures {taken})"
        lines.append(entry)
    return "\n".join(lines)
