"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import MissingKingError
from src.core.shared_types import Color, PieceType

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_FEN = "/".join(["8"] * 8)


def test_starting_position() -> None:
    board = Board.starting_position()
    assert board.to_fen() == STARTING_POSITION_FEN
    assert board.piece(Square.from_algebraic("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square.from_algebraic("d8")) == Piece(PieceType.QUEEN, Color.BLACK)
    assert len(list(board.occupied_squares())) == 32


def test_starting_position_ids_are_unique() -> None:
    """A frontend tracks the pieces by their id"""
    ids = [piece.id for _, piece in Board.starting_position().occupied_squares()]
    assert len(set(ids)) == 32
    assert "white-pawn-4" in ids
    assert "black-queen-3" in ids


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION_FEN,
        EMPTY_FEN,
        "4R1k1/5ppp/8/8/8/8/8/6K1",
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
    ],
)
def test_fen_placement(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


def test_from_fen_first_rank_is_row_zero() -> None:
    """The FEN string starts with the 8th rank, which is row 0"""
    board = Board.from_fen("r7/8/8/8/8/8/8/7K")
    assert board.piece(Square(0, 0)) == Piece(PieceType.ROOK, Color.BLACK)
    assert board.piece(Square(7, 7)) == Piece(PieceType.KING, Color.WHITE)


def test_piece_off_the_board_is_none() -> None:
    board = Board.starting_position()
    assert board.piece(Square(-1, 0)) is None
    assert board.piece(Square(0, 8)) is None


def test_move_piece_returns_new_board() -> None:
    """The board moved from is left alone: a new grid gets built"""
    board = Board.starting_position()
    e2 = Square.from_algebraic("e2")
    e4 = Square.from_algebraic("e4")

    new_board = board.move_piece(e2, e4)

    assert board.to_fen() == STARTING_POSITION_FEN
    assert new_board.piece(e2) is None
    assert new_board.piece(e4) == Piece(PieceType.PAWN, Color.WHITE)
    assert new_board is not board


def test_move_piece_rows_are_not_shared() -> None:
    """Rank-by-rank copy: no row object of the new board is a row of the old one"""
    board = Board.starting_position()
    new_board = board.move_piece(Square.from_algebraic("e2"), Square.from_algebraic("e4"))
    assert all(
        new_row is not old_row for new_row, old_row in zip(new_board.grid, board.grid)
    )
    assert all(isinstance(row, tuple) for row in new_board.grid)


def test_move_piece_captures() -> None:
    board = Board.from_fen("8/8/8/3p4/8/8/3R4/8")
    new_board = board.move_piece(Square.from_algebraic("d2"), Square.from_algebraic("d5"))
    assert new_board.to_fen() == "8/8/8/3R4/8/8/8/8"


def test_place_pieces() -> None:
    board = Board.from_fen(EMPTY_FEN)
    new_board = board.place_pieces(
        {
            Square.from_algebraic("e1"): Piece(PieceType.KING, Color.WHITE),
            Square.from_algebraic("e8"): Piece(PieceType.KING, Color.BLACK),
        }
    )
    assert new_board.to_fen() == "4k3/8/8/8/8/8/8/4K3"
    assert new_board.place_piece(None, Square.from_algebraic("e8")).to_fen() == "8/8/8/8/8/8/8/4K3"


def test_locate_color_is_row_major() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/PP6/4K3")
    assert board.locate_color(Color.WHITE) == [
        Square.from_algebraic("a2"),
        Square.from_algebraic("b2"),
        Square.from_algebraic("e1"),
    ]


def test_find_king() -> None:
    board = Board.starting_position()
    assert board.find_king(Color.WHITE) == Square.from_algebraic("e1")
    assert board.find_king(Color.BLACK) == Square.from_algebraic("e8")


def test_find_missing_king_raises() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/8/8")
    with pytest.raises(MissingKingError):
        board.find_king(Color.WHITE)
