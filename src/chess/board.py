"""The Game board: an 8x8 grid of (optional) pieces. Every change produces a new Board."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import BACK_RANK_ORDER, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import MissingKingError
from src.core.shared_types import Color, PieceType

Grid = tuple[tuple[Optional[Piece], ...], ...]


def _empty_rows() -> list[list[Optional[Piece]]]:
    return [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]


def _freeze(rows: list[list[Optional[Piece]]]) -> Grid:
    return tuple(tuple(row) for row in rows)


@dataclass(frozen=True)
class Board:
    """
    Immutable board.

    NOTE: `grid[row][col]`, row 0 is the 8th rank. Rows are tuples, so two boards can never share a row that one of
    them could still change. Transitions copy the board rank by rank (see `_thaw()`).
    """

    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(_freeze(_empty_rows()))

    @classmethod
    def starting_position(cls) -> Self:
        rows = _empty_rows()
        for col in range(BOARD_DIMENSIONS[1]):
            rows[1][col] = Piece(PieceType.PAWN, Color.BLACK, f"black-pawn-{col}")
            rows[6][col] = Piece(PieceType.PAWN, Color.WHITE, f"white-pawn-{col}")

        for col, piece_type in enumerate(BACK_RANK_ORDER):
            rows[0][col] = Piece(piece_type, Color.BLACK, f"black-{piece_type}-{col}")
            rows[7][col] = Piece(piece_type, Color.WHITE, f"white-{piece_type}-{col}")
        return cls(_freeze(rows))

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        * FEN is read from the 8th rank down to the 1st, which matches our row order (row 0 = 8th rank)
        * a number denotes that many consecutive empty squares
        * capital letters are white pieces
        """
        rows = _empty_rows()
        for row, fen_one_rank in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_rank:
                if character.isalpha():
                    piece = Piece.from_fen(character)
                    rows[row][col] = Piece(
                        piece.type, piece.color, f"{piece.color}-{piece.type}-{row}{col}"
                    )
                    col += 1
                else:
                    col += int(character)
        return cls(_freeze(rows))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(row) for row in self.grid)

    def _rank_to_fen(self, row: tuple[Optional[Piece], ...]) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        """Off-board squares simply hold no piece"""
        if not square.is_within_bounds():
            return None
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def occupied_squares(self) -> Iterator[tuple[Square, Piece]]:
        """Row-major scan. The search relies on this order being stable."""
        for row, rank in enumerate(self.grid):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield Square(row, col), piece

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.occupied_squares() if piece.color == color
        ]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            square
            for square, piece in self.occupied_squares()
            if piece.type == piece_type and piece.color == color
        ]

    def find_king(self, color: Color) -> Square:
        kings = self.locate_pieces(PieceType.KING, color)
        if not kings:
            raise MissingKingError(f"No {color} king on the board: {self.to_fen()}")
        return kings[0]

    # --- TRANSITIONS (all return a new Board) ---
    def move_piece(self, from_square: Square, to_square: Square) -> Self:
        """Relocate whatever stands on from_square. Anything on to_square is removed."""
        rows = self._thaw()
        rows[to_square.row][to_square.col] = rows[from_square.row][from_square.col]
        rows[from_square.row][from_square.col] = None
        return type(self)(_freeze(rows))

    def place_piece(self, piece: Optional[Piece], square: Square) -> Self:
        """Put a piece on a square (None clears the square)"""
        rows = self._thaw()
        rows[square.row][square.col] = piece
        return type(self)(_freeze(rows))

    def place_pieces(self, placements: dict[Square, Optional[Piece]]) -> Self:
        rows = self._thaw()
        for square, piece in placements.items():
            rows[square.row][square.col] = piece
        return type(self)(_freeze(rows))

    def _thaw(self) -> list[list[Optional[Piece]]]:
        """Rank-by-rank copy of the grid into fresh lists"""
        return [list(rank) for rank in self.grid]
