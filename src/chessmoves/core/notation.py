"""FEN position-descriptor parsing and serialisation.

Only the piece placement feeds the legality engine. The remaining fields
are parsed, validated and carried along so a descriptor round-trips.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.board import Board
from chessmoves.core.coordinate import BOARD_SIZE, Coordinate
from chessmoves.core.enums import Team
from chessmoves.core.errors import ParseError
from chessmoves.core.piece import Piece
from chessmoves.core.rules import MoveRules

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Team] = {"w": Team.WHITE, "b": Team.BLACK}
_CASTLING_ORDER = "KQkq"
_EMPTY_RUNS = "12345678"


@dataclass(slots=True)
class PositionDescriptor:
    """Board plus the FEN metadata fields."""

    board: Board
    side_to_move: Team = Team.WHITE
    castling: str = "-"
    en_passant: Coordinate | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1


def _parse_placement(placement: str, fen: str) -> list[list[Piece | None]]:
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ParseError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    grid: list[list[Piece | None]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                if ch not in _EMPTY_RUNS:
                    raise ParseError(f"Invalid FEN digit {ch!r}: {fen!r}")
                row.extend([None] * int(ch))
            else:
                row.append(Piece.from_char(ch))
            if len(row) > BOARD_SIZE:
                raise ParseError(f"Invalid FEN rank width: {fen!r}")
        if len(row) != BOARD_SIZE:
            raise ParseError(f"Invalid FEN rank width: {fen!r}")
        grid.append(row)
    return grid


def _parse_castling(field: str) -> str:
    if field == "-":
        return field
    if len(set(field)) != len(field) or any(ch not in _CASTLING_ORDER for ch in field):
        raise ParseError(f"Invalid FEN castling field: {field!r}")
    return field


def _parse_counter(field: str, name: str, minimum: int) -> int:
    try:
        value = int(field)
    except ValueError:
        raise ParseError(f"Invalid FEN {name}: {field!r}") from None
    if value < minimum:
        raise ParseError(f"Invalid FEN {name}: {field!r}")
    return value


def parse_fen(fen: str, rules: MoveRules | None = None) -> PositionDescriptor:
    """Parse a FEN string into a :class:`PositionDescriptor`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ParseError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    board = Board.from_grid(_parse_placement(placement, fen), rules)

    side = _SIDES.get(side_part)
    if side is None:
        raise ParseError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = _parse_castling(castling_part)

    ep: Coordinate | None = None
    if ep_part != "-":
        ep = Coordinate.parse(ep_part)
        if ep.rank not in (3, 6):
            raise ParseError(f"Invalid FEN en-passant square: {ep_part!r}")

    halfmove = _parse_counter(parts[4], "halfmove clock", 0) if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

    return PositionDescriptor(board, side, castling, ep, halfmove, fullmove)


def board_from_fen(fen: str, rules: MoveRules | None = None) -> Board:
    """Parse just the board out of a FEN string."""
    return parse_fen(fen, rules).board


def _placement(board: Board) -> str:
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board.get_piece(Coordinate(row, col))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def descriptor_to_fen(descriptor: PositionDescriptor) -> str:
    """Serialise a :class:`PositionDescriptor` to FEN."""
    side_str = "w" if descriptor.side_to_move == Team.WHITE else "b"
    castling_str = descriptor.castling or "-"
    ep_str = (
        descriptor.en_passant.notation.lower()
        if descriptor.en_passant is not None
        else "-"
    )
    return (
        f"{_placement(descriptor.board)} {side_str} {castling_str} {ep_str} "
        f"{descriptor.halfmove_clock} {descriptor.fullmove_number}"
    )


def board_to_fen(board: Board, side_to_move: Team = Team.WHITE) -> str:
    """FEN for *board* with default metadata (no castling, no en passant)."""
    return descriptor_to_fen(PositionDescriptor(board, side_to_move))
