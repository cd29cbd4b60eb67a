"""Tests for Board: layout, move execution, graveyard accounting, display."""

import logging

import pytest

from chessmoves.core.board import Board
from chessmoves.core.coordinate import Coordinate
from chessmoves.core.coordinate import parse_coordinate as sq
from chessmoves.core.enums import PieceClass, Team
from chessmoves.core.errors import EmptyCoordinateError, IllegalMoveError, ParseError
from chessmoves.core.notation import board_from_fen
from chessmoves.core.piece import Piece
from chessmoves.core.rules import MoveRules


class TestBoardInitial:
    def test_kings_and_queens(self, initial_board: Board) -> None:
        assert initial_board.get_piece(sq("E1")) == Piece(PieceClass.KING, Team.WHITE)
        assert initial_board.get_piece(sq("D1")) == Piece(PieceClass.QUEEN, Team.WHITE)
        assert initial_board.get_piece(sq("E8")) == Piece(PieceClass.KING, Team.BLACK)
        assert initial_board.get_piece(sq("D8")) == Piece(PieceClass.QUEEN, Team.BLACK)

    def test_back_ranks(self, initial_board: Board) -> None:
        expected = [
            PieceClass.ROOK, PieceClass.KNIGHT, PieceClass.BISHOP, PieceClass.QUEEN,
            PieceClass.KING, PieceClass.BISHOP, PieceClass.KNIGHT, PieceClass.ROOK,
        ]
        for col, pc in enumerate(expected):
            assert initial_board[Coordinate(0, col)] == Piece(pc, Team.BLACK)
            assert initial_board[Coordinate(7, col)] == Piece(pc, Team.WHITE)

    def test_pawns(self, initial_board: Board) -> None:
        for col in range(8):
            assert initial_board[Coordinate(1, col)] == Piece(PieceClass.PAWN, Team.BLACK)
            assert initial_board[Coordinate(6, col)] == Piece(PieceClass.PAWN, Team.WHITE)

    def test_empty_middle(self, initial_board: Board) -> None:
        for row in range(2, 6):
            for col in range(8):
                assert initial_board.is_empty(Coordinate(row, col))
                assert initial_board.get_piece(Coordinate(row, col)) is None

    def test_counts(self, initial_board: Board) -> None:
        assert initial_board.piece_count() == 32
        assert initial_board.total_pieces() == 32
        assert initial_board.graveyard == ()

    def test_team_at(self, initial_board: Board) -> None:
        assert initial_board.team_at(sq("A8")) == Team.BLACK
        assert initial_board.team_at(sq("A1")) == Team.WHITE
        assert initial_board.team_at(sq("A4")) is None

    def test_pieces_row_major(self, initial_board: Board) -> None:
        pieces = list(initial_board.pieces())
        assert len(pieces) == 32
        assert pieces[0][0] == sq("A8")
        assert pieces[-1][0] == sq("H1")


class TestBoardAccess:
    def test_get_piece_returns_copy(self, initial_board: Board) -> None:
        piece = initial_board.get_piece(sq("E2"))
        assert piece is not None
        piece._record_move()
        assert initial_board.get_piece(sq("E2")).is_first_move
        assert "E4" in {str(c) for c in initial_board.piece_legal_moves(sq("E2"))}

    def test_legal_moves_on_empty_square(self, initial_board: Board) -> None:
        with pytest.raises(EmptyCoordinateError) as exc_info:
            initial_board.piece_legal_moves(sq("E4"))
        assert exc_info.value.coordinate == sq("E4")

    def test_from_grid(self) -> None:
        grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        grid[4][3] = Piece(PieceClass.ROOK, Team.BLACK)
        board = Board.from_grid(grid)
        assert board[sq("D4")] == Piece(PieceClass.ROOK, Team.BLACK)
        assert board.piece_count() == 1

    def test_from_grid_copies_pieces(self) -> None:
        rook = Piece(PieceClass.ROOK, Team.BLACK)
        grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        grid[0][0] = rook
        board = Board.from_grid(grid)
        board.move_piece(sq("A8"), sq("A5"))
        assert rook.is_first_move

    @pytest.mark.parametrize(
        "grid",
        [
            [[None] * 8] * 7,
            [[None] * 8] * 7 + [[None] * 7],
        ],
    )
    def test_from_grid_wrong_shape(self, grid: list) -> None:
        with pytest.raises(ParseError):
            Board.from_grid(grid)

    @pytest.mark.parametrize("cell", ["K", 3, object()])
    def test_from_grid_rejects_non_pieces(self, cell: object) -> None:
        grid: list[list[object]] = [[None] * 8 for _ in range(8)]
        grid[2][5] = cell
        with pytest.raises(ParseError, match="not a piece"):
            Board.from_grid(grid)  # type: ignore[arg-type]


class TestMovePiece:
    def test_pawn_double_step_then_illegal(self, initial_board: Board) -> None:
        assert initial_board.move_piece(sq("E2"), sq("E4")) is None
        assert initial_board.is_empty(sq("E2"))
        assert initial_board[sq("E4")].piece_class == PieceClass.PAWN
        with pytest.raises(IllegalMoveError) as exc_info:
            initial_board.move_piece(sq("E4"), sq("E6"))
        assert exc_info.value.from_coord == sq("E4")
        assert exc_info.value.to_coord == sq("E6")

    def test_move_count_incremented(self, initial_board: Board) -> None:
        initial_board.move_piece(sq("G1"), sq("F3"))
        initial_board.move_piece(sq("F3"), sq("G5"))
        assert initial_board[sq("G5")].move_count == 2

    def test_empty_source_leaves_board_unchanged(self, initial_board: Board) -> None:
        before = initial_board.copy()
        rendered = str(initial_board)
        with pytest.raises(EmptyCoordinateError):
            initial_board.move_piece(sq("E4"), sq("E5"))
        assert initial_board == before
        assert str(initial_board) == rendered

    def test_illegal_move_leaves_board_unchanged(self, initial_board: Board) -> None:
        before = initial_board.copy()
        with pytest.raises(IllegalMoveError):
            initial_board.move_piece(sq("A1"), sq("A3"))
        assert initial_board == before

    def test_cannot_capture_own_piece(self, initial_board: Board) -> None:
        with pytest.raises(IllegalMoveError):
            initial_board.move_piece(sq("D1"), sq("D2"))

    def test_capture_goes_to_graveyard(self) -> None:
        board = board_from_fen("8/8/8/4p3/3P4/8/8/8 w - - 0 1")
        moves = board.piece_legal_moves(sq("D4"))
        assert moves[sq("E5")] == sq("E5")

        captured = board.move_piece(sq("D4"), sq("E5"))

        assert captured == Piece(PieceClass.PAWN, Team.BLACK)
        assert board.is_empty(sq("D4"))
        assert board[sq("E5")].team == Team.WHITE
        assert board.graveyard == (Piece(PieceClass.PAWN, Team.BLACK),)
        assert board.piece_count() == 1
        assert board.total_pieces() == 2

    def test_total_conserved_over_a_game(self, initial_board: Board) -> None:
        for a, b in [("E2", "E4"), ("D7", "D5"), ("E4", "D5"), ("D8", "D5")]:
            initial_board.move_piece(sq(a), sq(b))
            assert initial_board.total_pieces() == 32
        assert len(initial_board.graveyard) == 2
        assert [p.team for p in initial_board.graveyard] == [Team.BLACK, Team.WHITE]
        assert initial_board.piece_count() == 30

    def test_no_turn_enforcement(self, initial_board: Board) -> None:
        initial_board.move_piece(sq("E2"), sq("E4"))
        initial_board.move_piece(sq("D2"), sq("D4"))
        initial_board.move_piece(sq("E4"), sq("E5"))
        assert initial_board[sq("E5")].move_count == 2

    def test_legacy_diagonal_step_onto_empty_square(self, initial_board: Board) -> None:
        assert initial_board.move_piece(sq("E2"), sq("D3")) is None
        assert initial_board.graveyard == ()

    def test_legacy_double_step_jumps_blocker(self, initial_board: Board) -> None:
        for a, b in [("E2", "E4"), ("E4", "E5"), ("E5", "E6"), ("E7", "E5")]:
            initial_board.move_piece(sq(a), sq(b))
        assert initial_board[sq("E5")].team == Team.BLACK

    def test_standard_double_step_blocked(self) -> None:
        board = Board.initial(MoveRules.standard())
        for a, b in [("E2", "E4"), ("E4", "E5"), ("E5", "E6")]:
            board.move_piece(sq(a), sq(b))
        with pytest.raises(IllegalMoveError):
            board.move_piece(sq("E7"), sq("E5"))

    def test_logging(
        self, initial_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="chessmoves.core.board")
        initial_board.move_piece(sq("E2"), sq("E4"))
        initial_board.move_piece(sq("D7"), sq("D5"))
        initial_board.move_piece(sq("E4"), sq("D5"))
        messages = [r.getMessage() for r in caplog.records]
        assert any("E2 -> E4" in m for m in messages)
        assert any(
            r.levelno == logging.INFO and "captured on D5" in r.getMessage()
            for r in caplog.records
        )


class TestBoardCopyAndDisplay:
    def test_copy_independence(self, initial_board: Board) -> None:
        copy = initial_board.copy()
        assert copy == initial_board
        copy.move_piece(sq("E2"), sq("E4"))
        assert copy != initial_board
        assert initial_board[sq("E2")] is not None

    def test_equality_sees_move_counters(self) -> None:
        a = board_from_fen("8/8/8/8/8/8/8/N7 w - - 0 1")
        b = a.copy()
        a.move_piece(sq("A1"), sq("B3"))
        a.move_piece(sq("B3"), sq("A1"))
        assert a != b

    def test_render(self, initial_board: Board) -> None:
        lines = str(initial_board).splitlines()
        assert len(lines) == 10
        assert lines[0] == "8 ┃ ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[1] == "7 ┃ ♟ ♟ ♟ ♟ ♟ ♟ ♟ ♟"
        assert lines[4] == "4 ┃ . . . . . . . ."
        assert lines[7] == "1 ┃ ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"
        assert lines[8] == "  ┗━━━━━━━━━━━━━━━━"
        assert lines[9] == "    A B C D E F G H"

    def test_repr(self, initial_board: Board) -> None:
        assert "pieces=32" in repr(initial_board)
