"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chessmoves.core import (
    Board,
    BoardError,
    Coordinate,
    MoveRules,
    ParseError,
    board_from_fen,
)

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_move(text: str) -> tuple[Coordinate, Coordinate]:
    """Parse ``'E2E4'`` or ``'E2-E4'`` into a coordinate pair."""
    if len(text) == 5 and text[2] == "-":
        compact = text[:2] + text[3:]
    else:
        compact = text
    if len(compact) != 4:
        raise ParseError(f"Invalid move: {text!r}")
    return Coordinate.parse(compact[:2]), Coordinate.parse(compact[2:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmoves",
        description="Inspect legal moves and play them on a chess board.",
    )
    parser.add_argument("--fen", help="start from this FEN position")
    parser.add_argument(
        "--strict-pawns",
        action="store_true",
        help="require a clear path for the pawn double step and a capture "
        "for diagonal pawn moves",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (repeatable)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="print the board")

    moves = sub.add_parser("moves", help="list legal destinations for a square")
    moves.add_argument("square", help="source square, e.g. B1")

    play = sub.add_parser("play", help="apply moves in order and print the board")
    play.add_argument("moves", nargs="+", metavar="MOVE", help="e.g. E2E4 or E2-E4")
    return parser


def _make_board(args: argparse.Namespace) -> Board:
    rules = MoveRules.standard() if args.strict_pawns else MoveRules.legacy()
    if args.fen:
        return board_from_fen(args.fen, rules)
    return Board.initial(rules)


def _cmd_moves(board: Board, square: str) -> None:
    origin = Coordinate.parse(square)
    legal = board.piece_legal_moves(origin)
    for target in sorted(legal, key=lambda c: c.notation):
        marker = "x" if legal[target] is not None else " "
        print(f"{marker}{target}")


def _cmd_play(board: Board, moves: Sequence[str]) -> None:
    for text in moves:
        from_coord, to_coord = parse_move(text)
        captured = board.move_piece(from_coord, to_coord)
        _LOGGER.info("Played %s -> %s", from_coord, to_coord)
        if captured is not None:
            print(f"{from_coord}-{to_coord} captures {captured.symbol}")
    print(board)
    graveyard = board.graveyard
    if graveyard:
        print("Graveyard: " + " ".join(p.symbol for p in graveyard))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        board = _make_board(args)
        if args.command == "show":
            print(board)
        elif args.command == "moves":
            _cmd_moves(board, args.square)
        elif args.command == "play":
            _cmd_play(board, args.moves)
    except BoardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
