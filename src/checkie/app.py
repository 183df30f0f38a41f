"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from checkie.config import Config, load_config
from checkie.core.errors import CheckersError
from checkie.core.notation import STARTING_FEN, board_from_fen, describe_position
from checkie.core.rules import Rules
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import SearchLimits
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_PLIES = 200


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkie",
        description="Checkers rules engine and minimax opponent",
    )
    parser.add_argument("--config", default=None, help="Path to a checkie.toml file")
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="List the legal moves of a position")
    moves.add_argument("fen", nargs="?", default=STARTING_FEN)

    best = sub.add_parser("best", help="Print the engine's move for a position")
    best.add_argument("fen", nargs="?", default=STARTING_FEN)
    best.add_argument("--depth", type=int, default=None, help="Search depth in plies")
    best.add_argument("--seed", type=int, default=None, help="Tie-break RNG seed")
    best.add_argument("--time-ms", type=int, default=None, help="Time limit in ms")

    describe = sub.add_parser("describe", help="Print a position summary")
    describe.add_argument("fen", nargs="?", default=STARTING_FEN)

    selfplay = sub.add_parser("selfplay", help="Let the engine play both sides")
    selfplay.add_argument("--depth", type=int, default=None, help="Search depth in plies")
    selfplay.add_argument("--max-plies", type=int, default=DEFAULT_MAX_PLIES)
    selfplay.add_argument("--seed", type=int, default=None, help="Tie-break RNG seed")
    return parser


def _engine(cfg: Config, seed: int | None) -> MinimaxEngine:
    if seed is None:
        seed = cfg.search.seed
    return MinimaxEngine(rng=random.Random(seed), variant=cfg.rules.variant())


def _cmd_moves(args: argparse.Namespace, cfg: Config) -> int:
    board, side = board_from_fen(args.fen)
    moves = Rules.legal_moves(board, side, cfg.rules.variant())
    if not moves:
        print(f"{side} has no legal moves")
        return 0
    for move in moves:
        print(move)
    return 0


def _cmd_best(args: argparse.Namespace, cfg: Config) -> int:
    board, side = board_from_fen(args.fen)
    depth = args.depth if args.depth is not None else cfg.search.depth
    time_ms = args.time_ms if args.time_ms is not None else cfg.search.time_limit_ms
    result = _engine(cfg, args.seed).search(
        board, side, SearchLimits(max_depth=depth, time_limit_ms=time_ms)
    )
    if result.best_move is None:
        print(f"{side} has no legal moves")
        return 0
    print(f"{result.best_move} score={result.score:g} nodes={result.nodes}")
    return 0


def _cmd_describe(args: argparse.Namespace, cfg: Config) -> int:
    board, side = board_from_fen(args.fen)
    print(describe_position(board, side, Rules.legal_moves(board, side, cfg.rules.variant())))
    return 0


def _cmd_selfplay(args: argparse.Namespace, cfg: Config) -> int:
    depth = args.depth if args.depth is not None else cfg.search.depth
    limits = SearchLimits(max_depth=depth, time_limit_ms=cfg.search.time_limit_ms)
    engine = _engine(cfg, args.seed)
    game = GameState(variant=cfg.rules.variant())
    game.setup()

    while not game.is_game_over and game.ply_count < args.max_plies:
        result = engine.search(game.board, game.side_to_move, limits)
        if result.best_move is None:
            break
        record = game.apply_move(result.best_move)
        print(f"{game.ply_count:3d}. {record.side}: {record.text}")

    print(repr(game.board))
    if game.is_game_over:
        print(f"Result: {game.result.name.lower()}")
    else:
        print(f"Stopped after {game.ply_count} plies")
    return 0


_COMMANDS = {
    "moves": _cmd_moves,
    "best": _cmd_best,
    "describe": _cmd_describe,
    "selfplay": _cmd_selfplay,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``checkie`` command line."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        cfg = load_config(args.config)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    depth = getattr(args, "depth", None)
    if depth is not None and depth <= 0:
        parser.error(f"--depth must be >= 1, got {depth}")

    try:
        return _COMMANDS[args.command](args, cfg)
    except CheckersError as exc:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error ({exc.kind}): {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
