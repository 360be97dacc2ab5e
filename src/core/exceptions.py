"""
Custom exceptions.

The rules engine itself signals illegal moves by returning None. These exceptions are raised by the layers around it
(service, request validation, persistence) and for the one invariant the engine cannot recover from: a missing king.
"""


class ChessError(Exception):
    """Base class of everything raised by this package"""


class MissingKingError(ChessError):
    """
    A color has no king on the board.

    Can only happen when a board was assembled by hand, bypassing make_move/undo. Not part of the recovery contract.
    """


# --- SESSION / GAME RULES ---
class GameError(ChessError):
    """Base class for requests the game refuses to carry out"""


class IllegalMoveError(GameError):
    pass


class NotYourTurnError(GameError):
    pass


class GameStateError(GameError):
    """The request does not fit the current state of the session (game over, no bot configured, ...)"""


class NothingToUndoError(GameError):
    pass


# --- OTHER LAYERS ---
class RepositoryError(ChessError):
    pass


class InvalidRequestError(ChessError):
    """
    Raised from pydantic validators.

    NOTE: must not subclass ValueError, pydantic would wrap it into a ValidationError.
    """
