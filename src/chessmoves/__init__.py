"""chessmoves - chess board model with a basic move-legality engine."""

from chessmoves.core import (
    Board,
    BoardError,
    Coordinate,
    EmptyCoordinateError,
    IllegalMoveError,
    MoveRules,
    ParseError,
    Piece,
    PieceClass,
    RangeError,
    Team,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardError",
    "Coordinate",
    "EmptyCoordinateError",
    "IllegalMoveError",
    "MoveRules",
    "ParseError",
    "Piece",
    "PieceClass",
    "RangeError",
    "Team",
    "__version__",
]
