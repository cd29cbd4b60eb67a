"""Piece value object."""

from __future__ import annotations

from chessmoves.core.enums import PieceClass, Team
from chessmoves.core.errors import ParseError

# FEN character ↔ (Team, PieceClass)
_CHAR_MAP: dict[str, tuple[Team, PieceClass]] = {
    "P": (Team.WHITE, PieceClass.PAWN),
    "N": (Team.WHITE, PieceClass.KNIGHT),
    "B": (Team.WHITE, PieceClass.BISHOP),
    "R": (Team.WHITE, PieceClass.ROOK),
    "Q": (Team.WHITE, PieceClass.QUEEN),
    "K": (Team.WHITE, PieceClass.KING),
    "p": (Team.BLACK, PieceClass.PAWN),
    "n": (Team.BLACK, PieceClass.KNIGHT),
    "b": (Team.BLACK, PieceClass.BISHOP),
    "r": (Team.BLACK, PieceClass.ROOK),
    "q": (Team.BLACK, PieceClass.QUEEN),
    "k": (Team.BLACK, PieceClass.KING),
}

_UNICODE: dict[tuple[Team, PieceClass], str] = {
    (Team.WHITE, PieceClass.KING): "♔",
    (Team.WHITE, PieceClass.QUEEN): "♕",
    (Team.WHITE, PieceClass.ROOK): "♖",
    (Team.WHITE, PieceClass.BISHOP): "♗",
    (Team.WHITE, PieceClass.KNIGHT): "♘",
    (Team.WHITE, PieceClass.PAWN): "♙",
    (Team.BLACK, PieceClass.KING): "♚",
    (Team.BLACK, PieceClass.QUEEN): "♛",
    (Team.BLACK, PieceClass.ROOK): "♜",
    (Team.BLACK, PieceClass.BISHOP): "♝",
    (Team.BLACK, PieceClass.KNIGHT): "♞",
    (Team.BLACK, PieceClass.PAWN): "♟",
}

_FEN_CHARS: dict[tuple[Team, PieceClass], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A chess piece: fixed class and team plus a move counter.

    The counter is advanced only by :class:`~chessmoves.core.board.Board`
    when it relocates the piece. Use :meth:`copy` to get an independent value.
    """

    __slots__ = ("_piece_class", "_team", "_move_count")

    def __init__(self, piece_class: PieceClass, team: Team) -> None:
        self._piece_class = PieceClass(piece_class)
        self._team = Team(team)
        self._move_count = 0

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def piece_class(self) -> PieceClass:
        return self._piece_class

    @property
    def team(self) -> Team:
        return self._team

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def is_first_move(self) -> bool:
        return self._move_count == 0

    def copy(self) -> Piece:
        p = Piece(self._piece_class, self._team)
        p._move_count = self._move_count
        return p

    def _record_move(self) -> None:
        """Board-only hook: the piece was relocated once more."""
        self._move_count += 1

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self._team, self._piece_class)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            team, piece_class = _CHAR_MAP[char]
        except KeyError:
            raise ParseError(f"Invalid piece character: {char!r}") from None
        return cls(piece_class, team)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._team, self._piece_class)]

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self._piece_class == other._piece_class
            and self._team == other._team
            and self._move_count == other._move_count
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Piece({self._piece_class.name}, {self._team.name}, "
            f"moves={self._move_count})"
        )
