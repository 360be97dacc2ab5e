"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the target squares for each piece type.

These are pseudo-legal moves: whether a move leaves your own king attacked is checked later (see legality.py)
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """
    A move that has been accepted by the rules.

    NOTE: is_en_passant, is_castling and promotion_piece are part of the shape, but no rule produces them (yet).
    """

    from_square: Square
    to_square: Square
    piece: Piece
    captured_piece: Optional[Piece]
    notation: str
    is_en_passant: bool = False
    is_castling: bool = False
    promotion_piece: Optional[PieceType] = None

    @classmethod
    def from_board(cls, board: Board, from_square: Square, to_square: Square) -> Self:
        """Snapshot of the moving (and captured) piece, taken on the board BEFORE the move is made."""
        piece = board.piece(from_square)
        # for the type checker: only called for squares holding a piece
        assert piece is not None
        captured = board.piece(to_square)
        return cls(
            from_square=from_square,
            to_square=to_square,
            piece=piece,
            captured_piece=captured,
            notation=move_notation(to_square, piece, captured),
        )

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    def to_uci(self) -> str:
        """Coordinate notation, ex. 'e2e4'. Used to store and replay games"""
        return build_uci(self.from_square, self.to_square)


def build_uci(from_square: Square, to_square: Square) -> str:
    return f"{from_square.to_algebraic()}{to_square.to_algebraic()}"


def parse_uci(uci: str) -> tuple[Square, Square]:
    """'e2e4' -> (e2, e4)"""
    return Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:4])


def move_notation(
    to_square: Square, piece: Piece, captured_piece: Optional[Piece]
) -> str:
    """
    Simplified algebraic notation
    ----
    <first letter of the piece type, upper case (nothing for pawns)><'x' if a piece got captured><target square>

    ex) 'e4', 'Qxd7', 'Bb5'

    NOTE: knight and king share the letter 'K' in this notation.
    """
    piece_symbol = "" if piece.type == PieceType.PAWN else piece.type[0].upper()
    capture_symbol = "x" if captured_piece is not None else ""
    return f"{piece_symbol}{capture_symbol}{to_square.to_algebraic()}"


# --- MOVEMENT RULES ---
def _is_available(target: Optional[Piece], player_color: Color) -> bool:
    """Empty, or holds an opponent's piece that can be captured"""
    return target is None or target.color != player_color


def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    The first occupied square is included only if it holds an opponent's piece (a capture).
    """
    player_color = board.piece(square).color

    targets: list[Square] = []
    for d_row, d_col in directions:
        target_square = square
        while True:
            target_square = target_square.offset(d_row, d_col)
            if not target_square.is_within_bounds():
                break

            piece_found = board.piece(target_square)
            if piece_found is None:
                targets.append(target_square)
                continue

            if piece_found.color != player_color:
                targets.append(target_square)
            break
    return targets


def single_step_move(square: Square, board: Board, deltas: list[Vector]) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that jump a fixed offset"""
    player_color = board.piece(square).color
    targets: list[Square] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        if _is_available(board.piece(target_square), player_color):
            targets.append(target_square)

    return targets


def pawn_direction(color: Color) -> int:
    """White moves UP the board (towards row 0), black moves DOWN"""
    return -1 if color == Color.WHITE else 1


def pawn_starting_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward (only onto an empty square).
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally

    NOTE: En passant is added separately (see `en_passant_targets()`)
    """
    color = board.piece(square).color
    direction = pawn_direction(color)

    targets: list[Square] = []
    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        targets.append(one_step)

        two_steps = square.offset(2 * direction, 0)
        if square.row == pawn_starting_row(color) and board.piece(two_steps) is None:
            targets.append(two_steps)

    for d_col in (-1, 1):
        target_square = square.offset(direction, d_col)
        if not target_square.is_within_bounds():
            continue
        target = board.piece(target_square)
        if target is not None and target.color != color:
            targets.append(target_square)
    return targets


def en_passant_targets(
    square: Square, board: Board, en_passant_target: Optional[Square]
) -> list[Square]:
    """
    The en passant target is added if it is one of the pawn's two diagonal-forward squares.

    NOTE: it is not verified that an opponent's pawn actually just moved past it. Whoever supplies the target square
    is trusted.
    """
    if en_passant_target is None:
        return []
    direction = pawn_direction(board.piece(square).color)
    return [
        square.offset(direction, d_col)
        for d_col in (-1, 1)
        if square.offset(direction, d_col) == en_passant_target
    ]


KNIGHT_DELTAS: list[Vector] = [
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
]

KING_DELTAS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

STRAIGHTS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3 (jumping over anything in between)"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_rook_moves(square, board) + candidate_bishop_moves(square, board)


def candidate_king_moves(square: Square, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time.

    No castling.
    """
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def pseudo_legal_moves(
    board: Board, from_square: Square, en_passant_target: Optional[Square] = None
) -> list[Square]:
    """
    All target squares the piece on from_square could move to, following its movement pattern.
    ---

    * An empty square yields no targets.
    * The result has no duplicates and keeps the generation order of the movement rule (the search depends on it).
    * Whether the move leaves the own king attacked is NOT considered here.
    """
    piece = board.piece(from_square)
    if piece is None:
        return []

    movement_rule = MOVEMENT_RULES[piece.type]
    targets = movement_rule(from_square, board)
    if piece.type == PieceType.PAWN:
        targets = targets + en_passant_targets(from_square, board, en_passant_target)
    return list(dict.fromkeys(targets))

