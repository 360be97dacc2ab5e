"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (rows, columns). Row 0 is the 8th rank (black's back rank), column 0 is the a-file.
BOARD_DIMENSIONS = (8, 8)
FILES = "abcdefgh"
RANKS = "87654321"


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' gets converted to (0, 0), 'h1' to (7, 7)"""
        col = FILES.index(sq[0])
        row = RANKS.index(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{FILES[self.col]}{RANKS[self.row]}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def distance_to_center(self) -> float:
        """Manhattan distance to the middle of the board (between d4, e4, d5, e5): 1.0 on those squares, 7.0 in a corner"""
        return abs(3.5 - self.row) + abs(3.5 - self.col)
