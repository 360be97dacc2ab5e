"""Orchestration of communication from API layer to the chess engine, the bot and persistence (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateSessionRequest,
    GameConfig,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveHintResponse,
    MoveRequest,
    SessionRequest,
    SessionResponse,
    SuggestionsResponse,
)
from src.bot.bot import ChessBot
from src.chess.advisor import suggested_moves
from src.chess.game import (
    GameState,
    initial_state,
    legal_moves_for,
    make_move,
    undo_last_move,
)
from src.chess.moves import parse_uci
from src.chess.square import Square
from src.core.config import Settings
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NothingToUndoError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import SessionModel
from src.core.shared_types import FINISHED_STATUSES, GameMode, Status
from src.db.repository import SessionRepository

logger = logging.getLogger(__name__)


class GameService:
    """
    Orchestration of layers for a game session.

    A session is stored as its configuration + the moves played. Every request rebuilds the GameState by replaying
    those moves, acts on it, and stores the result again.
    """

    def __init__(
        self,
        repository: SessionRepository,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()
        self.rng = rng or random.Random()

    # -- API routes logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new game from the standard starting position."""
        state = initial_state()
        _, session_id = self.repo.create_session(
            self._to_model(request.config, state)
        )
        logger.info(
            "Created session %s (%s, %s, player plays %s)",
            session_id,
            request.config.mode,
            request.config.difficulty,
            request.config.player_color,
        )
        return self._create_session_response(session_id, request.config, state)

    def get_session(self, request: SessionRequest) -> SessionResponse:
        """Retrieve current game state. Used by a frontend polling for the bot's reply for instance."""
        config, state = self._load(request.session_id)
        return self._create_session_response(request.session_id, config, state)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """
        Legal target squares for the piece on the requested square.
        Empty squares and squares of the opponent simply have none.
        """
        config, state = self._load(request.session_id)
        self._assert_in_progress(state)
        self._assert_human_turn(config, state)

        targets = legal_moves_for(state, Square.from_algebraic(request.square))
        return LegalMovesResponse(
            session_id=request.session_id,
            square=request.square,
            legal_moves=[square.to_algebraic() for square in targets],
        )

    def make_move(self, request: MoveRequest) -> SessionResponse:
        """A player attempts a move."""
        config, state = self._load(request.session_id)
        self._assert_in_progress(state)
        self._assert_human_turn(config, state)

        from_square = Square.from_algebraic(request.from_square)
        to_square = Square.from_algebraic(request.to_square)
        if to_square not in legal_moves_for(state, from_square):
            logger.warning(
                "Session %s: rejected move %s%s",
                request.session_id,
                request.from_square,
                request.to_square,
            )
            raise IllegalMoveError(
                f"Move not allowed: {request.from_square}{request.to_square}"
            )

        new_state = make_move(state, from_square, to_square)
        if new_state is None:
            raise IllegalMoveError(
                f"Move not allowed: {request.from_square}{request.to_square}"
            )
        return self._commit(request.session_id, config, new_state)

    def bot_move(self, request: SessionRequest) -> SessionResponse:
        """Let the bot play its move (when it is its turn)."""
        config, state = self._load(request.session_id)
        bot_color = config.bot_color
        if bot_color is None:
            raise GameStateError("No bot plays in this session.")
        self._assert_in_progress(state)
        if state.current_player != bot_color:
            raise NotYourTurnError(
                f"It is not the bot's turn. Waiting for {state.current_player} to move."
            )

        bot = ChessBot(
            config.difficulty,
            bot_color,
            rng=self.rng,
            depth=self.settings.search_depth,
        )
        move = bot.choose_move(state)
        if move is None:
            raise GameStateError("The bot has no legal move.")

        new_state = make_move(state, move.from_square, move.to_square)
        # for the type checker: the bot only picks legal moves
        assert new_state is not None
        return self._commit(request.session_id, config, new_state)

    def undo(self, request: SessionRequest) -> SessionResponse:
        """
        Take back the last move.

        Against the bot, this takes back the bot's reply as well: the player should be the one to move afterwards.
        """
        config, state = self._load(request.session_id)
        new_state = undo_last_move(state)
        if new_state is None:
            raise NothingToUndoError("No moves have been made yet.")

        if (
            config.mode == GameMode.HUMAN_VS_BOT
            and new_state.current_player != config.player_color
        ):
            new_state = undo_last_move(new_state) or new_state

        logger.info(
            "Session %s: undo, %d moves left",
            request.session_id,
            len(new_state.move_history),
        )
        return self._commit(request.session_id, config, new_state)

    def suggestions(self, request: SessionRequest) -> SuggestionsResponse:
        """A few moves for the player to move: the escape moves when in check, otherwise promising moves."""
        config, state = self._load(request.session_id)
        self._assert_in_progress(state)

        hints = suggested_moves(state)
        return SuggestionsResponse(
            session_id=request.session_id,
            in_check=state.status == Status.CHECK,
            suggestions=[
                MoveHintResponse(
                    from_square=hint.from_square.to_algebraic(),
                    to_square=hint.to_square.to_algebraic(),
                    notation=hint.notation,
                )
                for hint in hints
            ],
        )

    def delete_session(self, request: SessionRequest) -> None:
        """Handle a request to delete a session record."""
        if self.repo.delete_session(request.session_id) is not None:
            logger.info("Deleted session %s", request.session_id)

    # -- Internal helpers --
    def _load(self, session_id: UUID) -> tuple[GameConfig, GameState]:
        """Fetch the stored session and replay its moves"""
        model = self.repo.get_session(session_id)
        if model is None:
            raise RepositoryError(f"Session with {session_id=} not found.")

        config = GameConfig(
            mode=model.mode,
            difficulty=model.difficulty,
            player_color=model.player_color,
        )
        state = initial_state()
        for uci in model.moves:
            from_square, to_square = parse_uci(uci)
            next_state = None
            if to_square in legal_moves_for(state, from_square):
                next_state = make_move(state, from_square, to_square)
            if next_state is None:
                raise GameStateError(
                    f"Stored session {session_id} contains an illegal move: {uci}"
                )
            state = next_state
        return config, state

    def _commit(
        self, session_id: UUID, config: GameConfig, state: GameState
    ) -> SessionResponse:
        """Store the new state and return it"""
        updated = self.repo.update_session(session_id, self._to_model(config, state))
        if updated is None:
            raise RepositoryError(f"Session with {session_id=} not found.")

        if state.last_move is not None:
            logger.info(
                "Session %s: %s played %s, status %s",
                session_id,
                state.last_move.piece.color,
                state.last_move.notation,
                state.status,
            )
        return self._create_session_response(session_id, config, state)

    def _assert_in_progress(self, state: GameState) -> None:
        if state.status in FINISHED_STATUSES:
            raise GameStateError(f"Game is over. status: {state.status}")

    def _assert_human_turn(self, config: GameConfig, state: GameState) -> None:
        """Against the bot, the player can only act on their own turn."""
        if config.bot_color is not None and state.current_player == config.bot_color:
            raise NotYourTurnError(
                "It is not your turn. Waiting for the bot to make a move first."
            )

    def _to_model(self, config: GameConfig, state: GameState) -> SessionModel:
        return SessionModel(
            mode=config.mode,
            difficulty=config.difficulty,
            player_color=config.player_color,
            moves=[move.to_uci() for move in state.move_history],
            status=state.status,
        )

    def _create_session_response(
        self, session_id: UUID, config: GameConfig, state: GameState
    ) -> SessionResponse:
        return SessionResponse(
            session_id=session_id,
            config=config,
            board=[
                [piece.to_fen() if piece else None for piece in row]
                for row in state.board.grid
            ],
            position=state.board.to_fen(),
            current_player=state.current_player,
            status=state.status,
            move_history=[move.notation for move in state.move_history],
            last_move=state.last_move.notation if state.last_move else None,
            half_move_clock=state.half_move_clock,
            full_move_number=state.full_move_number,
        )
