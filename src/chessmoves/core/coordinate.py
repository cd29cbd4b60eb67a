"""Coordinate value type and algebraic-notation helpers.

Grid layout (row 0 is Black's back rank)::

    row 0 -> rank 8    A8 B8 ... H8
    row 7 -> rank 1    A1 B1 ... H1

Columns map to files A-H left to right.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.errors import ParseError, RangeError

BOARD_SIZE = 8
FILES = "ABCDEFGH"
RANKS = "12345678"


def _check_index(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < BOARD_SIZE:
        raise RangeError(f"{name} {value} is outside 0..{BOARD_SIZE - 1}")


@dataclass(frozen=True, order=True, slots=True)
class Coordinate:
    """Immutable (row, column) pair on the 8x8 grid."""

    row: int
    column: int

    def __post_init__(self) -> None:
        _check_index("row", self.row)
        _check_index("column", self.column)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse algebraic notation, e.g. ``'E2'`` -> row 6, column 4."""
        if not isinstance(text, str) or len(text) != 2:
            raise ParseError(f"Invalid coordinate: {text!r}")
        file_char = text[0].upper()
        rank_char = text[1]
        if file_char not in FILES or rank_char not in RANKS:
            raise ParseError(f"Invalid coordinate: {text!r}")
        return cls(BOARD_SIZE - int(rank_char), FILES.index(file_char))

    @classmethod
    def from_index(cls, index: int) -> Coordinate:
        """Inverse of :attr:`index`."""
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise RangeError(f"Square index {index} is outside 0..63")
        return cls(*divmod(index, BOARD_SIZE))

    @classmethod
    def all(cls) -> tuple[Coordinate, ...]:
        """Every square in row-major order."""
        return _ALL

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        """Shift by ``(d_row, d_col)``; raises :class:`RangeError` off-grid."""
        return Coordinate(self.row + d_row, self.column + d_col)

    def try_offset(self, d_row: int, d_col: int) -> Coordinate | None:
        """Like :meth:`offset` but returns ``None`` instead of raising."""
        row = self.row + d_row
        col = self.column + d_col
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return Coordinate(row, col)
        return None

    # ── Views ────────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.column

    @property
    def file(self) -> str:
        return FILES[self.column]

    @property
    def rank(self) -> int:
        return BOARD_SIZE - self.row

    @property
    def notation(self) -> str:
        """Uppercase algebraic name, e.g. ``'E2'``."""
        return f"{self.file}{self.rank}"

    def __str__(self) -> str:
        return self.notation


_ALL: tuple[Coordinate, ...] = tuple(
    Coordinate(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


def parse_coordinate(text: str) -> Coordinate:
    """Shorthand for :meth:`Coordinate.parse`."""
    return Coordinate.parse(text)
