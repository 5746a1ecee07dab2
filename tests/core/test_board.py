"""Tests for Board and Piece."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, in_bounds

STANDARD_DIAGRAM = (
    "rnbqkbnr",
    "pppppppp",
    "........",
    "........",
    "........",
    "........",
    "PPPPPPPP",
    "RNBQKBNR",
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[Square(7, 4)] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[Square(0, 4)] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[Square(7, col)] == Piece(Color.WHITE, pt)
            assert board[Square(0, col)] == Piece(Color.BLACK, pt)

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(1, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[Square(row, col)] is None

    def test_matches_diagram(self) -> None:
        assert Board.from_diagram(STANDARD_DIAGRAM) == Board.initial()


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[Square(4, 4)] = piece
        assert board[Square(4, 4)] == piece
        assert board.is_empty(Square(6, 4))

    def test_plain_tuple_access(self) -> None:
        board = Board.initial()
        assert board[(7, 4)] == Piece(Color.WHITE, PieceType.KING)

    @pytest.mark.parametrize("sq", [(8, 0), (-1, 3), (0, 8), (3, -1)])
    def test_out_of_bounds_get_raises(self, sq: tuple[int, int]) -> None:
        board = Board()
        with pytest.raises(ValueError, match="out of bounds"):
            board[sq]

    def test_out_of_bounds_set_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="out of bounds"):
            board[Square(8, 8)] = Piece(Color.WHITE, PieceType.ROOK)

    def test_in_bounds(self) -> None:
        assert in_bounds(0, 0)
        assert in_bounds(7, 7)
        assert not in_bounds(8, 0)
        assert not in_bounds(0, -1)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[Square(7, 4)] = None
        assert board != copy
        assert board[Square(7, 4)] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == Square(7, 4)
        assert board.king_square(Color.BLACK) == Square(0, 4)

    def test_king_square_follows_moves(self) -> None:
        board = Board.initial()
        king = board[Square(7, 4)]
        board[Square(5, 4)] = king
        board[Square(7, 4)] = None
        assert board.king_square(Color.WHITE) == Square(5, 4)

    def test_king_square_missing_is_none(self) -> None:
        board = Board()
        assert board.king_square(Color.WHITE) is None

    def test_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []
        assert board.king_square(Color.BLACK) is None

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "0 1 2 3 4 5 6 7" in text


class TestBoardDiagram:
    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError, match="Expected 8 rows"):
            Board.from_diagram(STANDARD_DIAGRAM[:7])

    def test_wrong_row_length(self) -> None:
        rows = list(STANDARD_DIAGRAM)
        rows[3] = "......."
        with pytest.raises(ValueError, match="Row 3"):
            Board.from_diagram(rows)

    def test_unknown_letter(self) -> None:
        rows = list(STANDARD_DIAGRAM)
        rows[4] = "...x...."
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram(rows)

    def test_spaces_ignored(self) -> None:
        rows = [" ".join(row) for row in STANDARD_DIAGRAM]
        assert Board.from_diagram(rows) == Board.initial()


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_round_trip(self) -> None:
        for char in "PNBRQKpnbrqk":
            assert str(Piece.from_char(char)) == char

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("z")
