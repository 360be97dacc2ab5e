"""Unit tests for /src/chess/square.py"""

import pytest

from src.chess.square import BOARD_DIMENSIONS, FILES, RANKS, Square


@pytest.mark.parametrize(
    "row, col, notation",
    [(row, col, f"{FILES[col]}{RANKS[row]}") for row in range(8) for col in range(8)],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """'a8' is the top left corner (0, 0) as seen from white, 'h1' the bottom right (7, 7)"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "notation, row, col",
    [("a8", 0, 0), ("h1", 7, 7), ("e2", 6, 4), ("d7", 1, 3)],
)
def test_to_algebraic_notation(notation: str, row: int, col: int) -> None:
    assert Square(row, col).to_algebraic() == notation


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_offset() -> None:
    assert Square(6, 4).offset(-2, 0) == Square.from_algebraic("e4")


@pytest.mark.parametrize(
    "notation, distance",
    [("d4", 1.0), ("e5", 1.0), ("a1", 7.0), ("h8", 7.0), ("e2", 3.0)],
)
def test_distance_to_center(notation: str, distance: float) -> None:
    assert Square.from_algebraic(notation).distance_to_center() == distance
