"""
The game state and the transitions between states.

This module is the entrypoint into the domain layer for the service layer.
Every function takes a GameState and returns a new one (or None if the request cannot be carried out). A GameState is
never changed after it has been created.
"""

from dataclasses import dataclass, replace
from typing import Optional

from src.chess.attacks import is_in_check
from src.chess.board import Board
from src.chess.legality import has_legal_move, legal_targets, trial_board
from src.chess.moves import Move
from src.chess.square import Square
from src.core.shared_types import Color, PieceType, Status, opponent_of

# Number of half-moves without capture or pawn move after which the game is a draw
HALF_MOVE_DRAW_LIMIT = 50


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game
    ----

    * selected_square / valid_moves: convenience for a frontend (the square clicked + its legal targets)
    * en_passant_target: part of the state, but no move ever sets it. Hence, en passant captures never happen.
    * half_move_clock: moves since the last capture or pawn move
    * full_move_number: starts at 1 and increments after every move black makes.
    """

    board: Board
    current_player: Color = Color.WHITE
    status: Status = Status.PLAYING
    move_history: tuple[Move, ...] = ()
    selected_square: Optional[Square] = None
    valid_moves: tuple[Square, ...] = ()
    last_move: Optional[Move] = None
    en_passant_target: Optional[Square] = None
    half_move_clock: int = 0
    full_move_number: int = 1


def initial_state() -> GameState:
    return GameState(board=Board.starting_position())


def state_from_board(
    board: Board,
    current_player: Color = Color.WHITE,
    half_move_clock: int = 0,
    full_move_number: int = 1,
) -> GameState:
    """Start from an arbitrary position (the status is computed, not trusted)"""
    return GameState(
        board=board,
        current_player=current_player,
        status=classify(board, current_player, half_move_clock),
        half_move_clock=half_move_clock,
        full_move_number=full_move_number,
    )


# --- STATUS ---
def classify(board: Board, side_to_move: Color, half_move_clock: int) -> Status:
    """
    Derive the status for the player who is about to move.

    Order matters: a checkmate/stalemate takes precedence over check, and check over the 50 half-move draw.
    """
    in_check = is_in_check(board, side_to_move)
    can_move = has_legal_move(board, side_to_move)

    if in_check and not can_move:
        return Status.CHECKMATE
    if not in_check and not can_move:
        return Status.STALEMATE
    if in_check:
        return Status.CHECK
    if half_move_clock >= HALF_MOVE_DRAW_LIMIT:
        return Status.DRAW
    return Status.PLAYING


# --- LEGAL MOVES FOR A SQUARE ---
def legal_moves_for(state: GameState, square: Square) -> list[Square]:
    """
    Legal targets for the piece on the square.

    Empty squares and squares holding an opponent's piece simply have no legal moves.
    """
    piece = state.board.piece(square)
    if piece is None or piece.color != state.current_player:
        return []
    return legal_targets(state.board, square, state.en_passant_target)


def select_square(state: GameState, square: Square) -> GameState:
    """Remember the square a player clicked together with its legal targets. Selecting it again deselects it."""
    if state.selected_square == square:
        return replace(state, selected_square=None, valid_moves=())

    targets = legal_moves_for(state, square)
    if not targets:
        return replace(state, selected_square=None, valid_moves=())
    return replace(state, selected_square=square, valid_moves=tuple(targets))


# --- MAKE / UNDO ---
def make_move(
    state: GameState, from_square: Square, to_square: Square
) -> Optional[GameState]:
    """
    Attempt to make a move
    -----

    1. copy the board and move the piece (a piece on the target square gets captured)
    2. if the piece stays where it is, or that leaves your own king attacked: the move is illegal -> None. The given
       state is untouched.
    3. otherwise record the move and build the next state:
        * other player to move, move appended to the history, selection cleared
        * en passant target cleared
        * half-move clock: back to 0 after a capture or a pawn move, else +1
        * full-move number +1 after black moved
        * status recomputed for the next player

    NOTE: to_square is expected to come from the move generator. Only the self-check test is done here.
    """
    new_board = trial_board(state.board, from_square, to_square)
    if new_board is None:
        return None

    move = Move.from_board(state.board, from_square, to_square)
    next_player = opponent_of(move.piece.color)
    half_move_clock = (
        0 if move.is_capture or move.piece.type == PieceType.PAWN else state.half_move_clock + 1
    )
    full_move_number = (
        state.full_move_number + 1
        if move.piece.color == Color.BLACK
        else state.full_move_number
    )

    return GameState(
        board=new_board,
        current_player=next_player,
        status=classify(new_board, next_player, half_move_clock),
        move_history=state.move_history + (move,),
        selected_square=None,
        valid_moves=(),
        last_move=move,
        en_passant_target=None,
        half_move_clock=half_move_clock,
        full_move_number=full_move_number,
    )


def undo_last_move(state: GameState) -> Optional[GameState]:
    """
    Take back the last move. None if no move has been made yet.
    ---

    NOTE: the half-move clock is simply decremented (never below 0). If the undone move had reset the clock, the value
    from before that move is not restored.
    """
    if not state.move_history:
        return None

    last = state.move_history[-1]
    board = state.board.place_pieces(
        {last.from_square: last.piece, last.to_square: last.captured_piece}
    )
    history = state.move_history[:-1]
    half_move_clock = max(0, state.half_move_clock - 1)
    full_move_number = (
        state.full_move_number - 1
        if last.piece.color == Color.BLACK
        else state.full_move_number
    )

    return GameState(
        board=board,
        current_player=last.piece.color,
        status=classify(board, last.piece.color, half_move_clock),
        move_history=history,
        selected_square=None,
        valid_moves=(),
        last_move=history[-1] if history else None,
        en_passant_target=None,
        half_move_clock=half_move_clock,
        full_move_number=full_move_number,
    )
