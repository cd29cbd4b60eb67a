"""Exception hierarchy raised by the board model."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmoves.core.coordinate import Coordinate


class BoardError(Exception):
    """Base class for every error raised by :mod:`chessmoves.core`."""


class RangeError(BoardError, ValueError):
    """A coordinate would fall outside the 8x8 grid."""


class ParseError(BoardError, ValueError):
    """Malformed coordinate notation or position descriptor."""


class EmptyCoordinateError(BoardError):
    """A legality or move query targeted a square with no piece."""

    def __init__(self, coordinate: Coordinate) -> None:
        super().__init__(f"No piece on {coordinate}")
        self.coordinate = coordinate


class IllegalMoveError(BoardError):
    """The requested destination is not among the piece's legal moves."""

    def __init__(self, from_coord: Coordinate, to_coord: Coordinate) -> None:
        super().__init__(f"Illegal move {from_coord} -> {to_coord}")
        self.from_coord = from_coord
        self.to_coord = to_coord
