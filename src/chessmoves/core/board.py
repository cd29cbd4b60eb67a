"""Board - piece placement, capture graveyard and move execution."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from chessmoves.core.coordinate import BOARD_SIZE, FILES, Coordinate
from chessmoves.core.enums import PieceClass, Team
from chessmoves.core.errors import EmptyCoordinateError, IllegalMoveError, ParseError
from chessmoves.core.move_generator import LegalMoves, MoveGenerator
from chessmoves.core.piece import Piece
from chessmoves.core.rules import MoveRules

_LOGGER = logging.getLogger(__name__)

BACK_RANK: tuple[PieceClass, ...] = (
    PieceClass.ROOK,
    PieceClass.KNIGHT,
    PieceClass.BISHOP,
    PieceClass.QUEEN,
    PieceClass.KING,
    PieceClass.BISHOP,
    PieceClass.KNIGHT,
    PieceClass.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces plus a graveyard of captures.

    After construction the grid is written only by :meth:`move_piece`.
    Callers sharing a board across threads must serialise access themselves.
    """

    __slots__ = ("_squares", "_graveyard", "_rules", "_generator")

    def __init__(self, rules: MoveRules | None = None) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._graveyard: list[Piece] = []
        self._rules = rules if rules is not None else MoveRules()
        self._generator = MoveGenerator(self, self._rules)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls, rules: MoveRules | None = None) -> Board:
        """Standard starting position."""
        b = cls(rules)
        for col, piece_class in enumerate(BACK_RANK):
            b._place(Coordinate(0, col), Piece(piece_class, Team.BLACK))
            b._place(Coordinate(1, col), Piece(PieceClass.PAWN, Team.BLACK))
            b._place(Coordinate(6, col), Piece(PieceClass.PAWN, Team.WHITE))
            b._place(Coordinate(7, col), Piece(piece_class, Team.WHITE))
        return b

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Piece | None]],
        rules: MoveRules | None = None,
    ) -> Board:
        """Build a board from 8 rows (row 0 = rank 8) of 8 optional pieces."""
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ParseError("Board grid must be 8 rows of 8 squares")
        b = cls(rules)
        for row_idx, row in enumerate(grid):
            for col_idx, piece in enumerate(row):
                if piece is None:
                    continue
                if not isinstance(piece, Piece):
                    raise ParseError(
                        f"Grid cell ({row_idx}, {col_idx}) is not a piece: {piece!r}"
                    )
                b._place(Coordinate(row_idx, col_idx), piece.copy())
        return b

    def _place(self, coordinate: Coordinate, piece: Piece | None) -> None:
        self._squares[coordinate.index] = piece

    # -- Element access -----------------------------------------------------

    def get_piece(self, coordinate: Coordinate) -> Piece | None:
        """Copy of the piece on *coordinate*, or ``None`` if it is empty."""
        piece = self._squares[coordinate.index]
        return piece.copy() if piece is not None else None

    __getitem__ = get_piece

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self._squares[coordinate.index] is None

    def team_at(self, coordinate: Coordinate) -> Team | None:
        """Team occupying *coordinate*, or ``None`` if it is empty."""
        piece = self._squares[coordinate.index]
        return piece.team if piece is not None else None

    @property
    def rules(self) -> MoveRules:
        return self._rules

    @property
    def graveyard(self) -> tuple[Piece, ...]:
        """Captured pieces in capture order."""
        return tuple(p.copy() for p in self._graveyard)

    def pieces(self) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares in row-major order."""
        for coordinate in Coordinate.all():
            piece = self._squares[coordinate.index]
            if piece is not None:
                yield coordinate, piece.copy()

    def piece_count(self) -> int:
        return sum(1 for p in self._squares if p is not None)

    def total_pieces(self) -> int:
        """Pieces on the board plus pieces in the graveyard."""
        return self.piece_count() + len(self._graveyard)

    # -- Legality -----------------------------------------------------------

    def piece_legal_moves(self, coordinate: Coordinate) -> LegalMoves:
        """Map each reachable destination to the square it captures on.

        Raises :class:`EmptyCoordinateError` if *coordinate* has no piece.
        """
        piece = self._squares[coordinate.index]
        if piece is None:
            raise EmptyCoordinateError(coordinate)
        moves = self._generator.legal_moves(coordinate, piece)
        _LOGGER.debug(
            "Legal moves for %r on %s: %s",
            piece,
            coordinate,
            sorted(str(c) for c in moves),
        )
        return moves

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, from_coord: Coordinate, to_coord: Coordinate) -> Piece | None:
        """Move the piece on *from_coord* to *to_coord*.

        Legality is evaluated in full before the grid is touched, so a
        failed call leaves the board unchanged. Returns the captured piece,
        if any.
        """
        piece = self._squares[from_coord.index]
        if piece is None:
            _LOGGER.debug("Rejected move from empty square %s", from_coord)
            raise EmptyCoordinateError(from_coord)

        legal_moves = self.piece_legal_moves(from_coord)
        if to_coord not in legal_moves:
            _LOGGER.debug("Rejected illegal move %s -> %s", from_coord, to_coord)
            raise IllegalMoveError(from_coord, to_coord)

        captured: Piece | None = None
        capture_at = legal_moves[to_coord]
        if capture_at is not None:
            captured = self._squares[capture_at.index]
            if captured is not None:
                self._graveyard.append(captured)
                self._place(capture_at, None)
                _LOGGER.info("%r captured on %s", captured, capture_at)

        self._place(from_coord, None)
        self._place(to_coord, piece)
        piece._record_move()
        _LOGGER.debug("Moved %r %s -> %s", piece, from_coord, to_coord)
        return captured.copy() if captured is not None else None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._rules)
        b._squares = [p.copy() if p is not None else None for p in self._squares]
        b._graveyard = [p.copy() for p in self._graveyard]
        return b

    # -- Display ------------------------------------------------------------

    def render(self) -> str:
        """Text diagram: ranks 8..1 down the left, files A..H along the bottom."""
        lines: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                piece = self._squares[row * BOARD_SIZE + col]
                cells.append(piece.symbol if piece is not None else ".")
            lines.append(f"{BOARD_SIZE - row} ┃ {' '.join(cells)}")
        lines.append("  ┗" + "━" * (BOARD_SIZE * 2))
        lines.append("    " + " ".join(FILES))
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares and self._graveyard == other._graveyard
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(pieces={self.piece_count()}, "
            f"graveyard={len(self._graveyard)}, rules={self._rules!r})"
        )
