"""Per-piece-class legal move generation.

Output of the engine is a *legal-move mapping*: destination coordinate ->
coordinate of the piece captured by moving there, or ``None`` when the
destination is empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from chessmoves.core.coordinate import Coordinate
from chessmoves.core.enums import PieceClass, Team
from chessmoves.core.rules import MoveRules

if TYPE_CHECKING:
    from chessmoves.core.board import Board
    from chessmoves.core.piece import Piece

LegalMoves: TypeAlias = dict[Coordinate, Coordinate | None]
Ray: TypeAlias = tuple[Coordinate, ...]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

SLIDER_REACH = 7
KING_REACH = 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Coordinate, ...], ...]:
    targets: list[tuple[Coordinate, ...]] = []
    for origin in Coordinate.all():
        moves = (origin.try_offset(d_row, d_col) for d_row, d_col in offsets)
        targets.append(tuple(c for c in moves if c is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
    reach: int,
) -> tuple[tuple[Ray, ...], ...]:
    rays_per_square: list[tuple[Ray, ...]] = []
    for origin in Coordinate.all():
        square_rays: list[Ray] = []
        for d_row, d_col in directions:
            ray: list[Coordinate] = []
            for step in range(1, reach + 1):
                target = origin.try_offset(d_row * step, d_col * step)
                if target is None:
                    break
                ray.append(target)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS, SLIDER_REACH)
_ROOK_RAYS = _build_rays(ROOK_DIRS, SLIDER_REACH)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS, SLIDER_REACH)
_KING_RAYS = _build_rays(QUEEN_DIRS, KING_REACH)

_SLIDER_RAYS: dict[PieceClass, tuple[tuple[Ray, ...], ...]] = {
    PieceClass.BISHOP: _BISHOP_RAYS,
    PieceClass.ROOK: _ROOK_RAYS,
    PieceClass.QUEEN: _QUEEN_RAYS,
    PieceClass.KING: _KING_RAYS,
}


def rays_from(piece_class: PieceClass, origin: Coordinate) -> tuple[Ray, ...]:
    """Unobstructed rays a sliding *piece_class* would walk from *origin*."""
    try:
        table = _SLIDER_RAYS[piece_class]
    except KeyError:
        raise ValueError(f"{piece_class.name} does not move along rays") from None
    return table[origin.index]


def knight_targets(origin: Coordinate) -> tuple[Coordinate, ...]:
    """In-grid knight jumps from *origin*."""
    return _KNIGHT_TARGETS[origin.index]


class MoveGenerator:
    """Computes legal-move mappings against a :class:`Board`.

    Only simple movement is modelled: no check detection, castling,
    en passant or promotion, and either team may move at any time.
    """

    __slots__ = ("_board", "_rules")

    def __init__(self, board: Board, rules: MoveRules | None = None) -> None:
        self._board = board
        self._rules = rules if rules is not None else MoveRules()

    @property
    def rules(self) -> MoveRules:
        return self._rules

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, origin: Coordinate, piece: Piece) -> LegalMoves:
        """Legal-move mapping for *piece* standing on *origin*."""
        moves: LegalMoves = {}
        piece_class = piece.piece_class

        if piece_class == PieceClass.KNIGHT:
            self._gen_knight(origin, piece.team, moves)
        elif piece_class in (
            PieceClass.BISHOP,
            PieceClass.ROOK,
            PieceClass.QUEEN,
            PieceClass.KING,
        ):
            self._gen_sliding(piece.team, rays_from(piece_class, origin), moves)
        elif piece_class == PieceClass.PAWN:
            self._gen_pawn(origin, piece.team, piece.is_first_move, moves)
        else:
            raise AssertionError(f"Unhandled piece class: {piece_class!r}")
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_knight(self, origin: Coordinate, team: Team, moves: LegalMoves) -> None:
        board = self._board
        for target in _KNIGHT_TARGETS[origin.index]:
            occupant = board.team_at(target)
            if occupant is None:
                moves[target] = None
            elif occupant == team.opposite:
                moves[target] = target

    def _gen_sliding(
        self,
        team: Team,
        rays: tuple[Ray, ...],
        moves: LegalMoves,
    ) -> None:
        board = self._board
        for ray in rays:
            for target in ray:
                occupant = board.team_at(target)
                if occupant is None:
                    moves[target] = None
                    continue
                if occupant == team.opposite:
                    moves[target] = target
                break

    def _gen_pawn(
        self,
        origin: Coordinate,
        team: Team,
        first_move: bool,
        moves: LegalMoves,
    ) -> None:
        board = self._board
        rules = self._rules
        step = team.forward

        one_step = origin.try_offset(step, 0)
        if one_step is not None and board.is_empty(one_step):
            moves[one_step] = None

        if first_move:
            two_step = origin.try_offset(step * 2, 0)
            if two_step is not None and board.is_empty(two_step):
                path_clear = one_step is not None and board.is_empty(one_step)
                if path_clear or not rules.pawn_double_step_needs_clear_path:
                    moves[two_step] = None

        for d_col in (-1, 1):
            target = origin.try_offset(step, d_col)
            if target is None:
                continue
            occupant = board.team_at(target)
            if occupant is None:
                if not rules.pawn_diagonal_needs_capture:
                    moves[target] = None
            elif occupant == team.opposite:
                moves[target] = target
