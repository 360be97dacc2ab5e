"""Unit tests for src/bot/evaluate.py"""

import pytest

from src.bot.evaluate import (
    CENTER_SQUARES,
    PIECE_VALUES,
    evaluate_board,
    evaluate_move,
    home_row,
    positional_value,
)
from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def test_center_squares() -> None:
    assert CENTER_SQUARES == {sq("d4"), sq("e4"), sq("d5"), sq("e5")}


def test_starting_position_is_balanced() -> None:
    board = Board.starting_position()
    assert evaluate_board(board, Color.WHITE) == pytest.approx(0.0)
    assert evaluate_board(board, Color.BLACK) == pytest.approx(0.0)


def test_evaluation_is_from_the_bots_point_of_view() -> None:
    """White is a queen up"""
    board = Board.from_fen("4k3/8/8/8/8/8/8/3QK3")
    white_score = evaluate_board(board, Color.WHITE)
    assert white_score > PIECE_VALUES[PieceType.QUEEN] - 1
    assert evaluate_board(board, Color.BLACK) == pytest.approx(-white_score)


@pytest.mark.parametrize(
    "piece, square, expected",
    [
        (Piece(PieceType.KNIGHT, Color.WHITE), "d4", 0.8),  # center + knight bonus
        (Piece(PieceType.PAWN, Color.WHITE), "e2", 0.5),  # 0.4 center + 1 row advanced
        (Piece(PieceType.PAWN, Color.BLACK), "e7", 0.5),  # mirror image
        (Piece(PieceType.ROOK, Color.WHITE), "a1", 0.0),  # corner
        (Piece(PieceType.BISHOP, Color.WHITE), "d3", 0.65),  # center + bishop bonus
        (Piece(PieceType.KNIGHT, Color.WHITE), "b1", 0.1),  # too far out for the bonus
    ],
)
def test_positional_value(piece: Piece, square: str, expected: float) -> None:
    assert positional_value(piece, sq(square)) == pytest.approx(expected)


def test_home_row() -> None:
    assert home_row(Color.WHITE) == 7
    assert home_row(Color.BLACK) == 0


def test_evaluate_move() -> None:
    board = Board.starting_position()
    # development of the knight
    assert evaluate_move(board, sq("g1"), sq("f3")) == pytest.approx(0.5)
    # pawn to the center
    assert evaluate_move(board, sq("e2"), sq("e4")) == pytest.approx(0.3)
    assert evaluate_move(board, sq("a2"), sq("a3")) == pytest.approx(0.0)


def test_evaluate_move_capture() -> None:
    board = Board.from_fen("7k/8/8/3q4/8/8/8/3R3K")
    assert evaluate_move(board, sq("d1"), sq("d5")) == pytest.approx(9.3)
