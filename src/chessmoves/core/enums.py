"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Team(IntEnum):
    """Side owning a piece."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a pawn advance: White climbs toward row 0."""
        return -1 if self is Team.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceClass(IntEnum):
    """The six kinds of chess piece."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6

    def __str__(self) -> str:
        return self.name.lower()
