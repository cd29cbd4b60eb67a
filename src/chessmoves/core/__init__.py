"""Core domain layer: board model and legality engine, stdlib only.

Quick start::

    from chessmoves.core import Board, Coordinate

    board = Board.initial()
    print(board.piece_legal_moves(Coordinate.parse("B1")))
    board.move_piece(Coordinate.parse("E2"), Coordinate.parse("E4"))
    print(board)
"""

from chessmoves.core.board import Board
from chessmoves.core.coordinate import Coordinate, parse_coordinate
from chessmoves.core.enums import PieceClass, Team
from chessmoves.core.errors import (
    BoardError,
    EmptyCoordinateError,
    IllegalMoveError,
    ParseError,
    RangeError,
)
from chessmoves.core.move_generator import LegalMoves, MoveGenerator
from chessmoves.core.notation import (
    STARTING_FEN,
    PositionDescriptor,
    board_from_fen,
    board_to_fen,
    descriptor_to_fen,
    parse_fen,
)
from chessmoves.core.piece import Piece
from chessmoves.core.rules import MoveRules

__all__ = [
    # Enums
    "PieceClass",
    "Team",
    # Errors
    "BoardError",
    "EmptyCoordinateError",
    "IllegalMoveError",
    "ParseError",
    "RangeError",
    # Domain objects
    "Board",
    "Coordinate",
    "LegalMoves",
    "MoveGenerator",
    "MoveRules",
    "Piece",
    "parse_coordinate",
    # Notation
    "STARTING_FEN",
    "PositionDescriptor",
    "board_from_fen",
    "board_to_fen",
    "descriptor_to_fen",
    "parse_fen",
]
