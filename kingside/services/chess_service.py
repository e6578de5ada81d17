"""Orchestration of communication from the UI-facing request models to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from kingside.api.models import (
    AppliedMoveResponse,
    ClickRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    ResetGameRequest,
    SquareModel,
)
from kingside.chess.game import GameState, reset_game
from kingside.chess.moves import AppliedMove
from kingside.chess.square import Square
from kingside.core.config import Settings
from kingside.core.exceptions import RepositoryError
from kingside.core.models import GameModel
from kingside.core.shared_types import Difficulty
from kingside.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for a human versus computer game."""

    def __init__(
        self,
        repository: GameRepository,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()
        self.rng = rng or random.Random()

    # -- UI requests logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game from the standard position. If the computer plays white, it moves right away."""
        difficulty = request.difficulty or self.settings.default_difficulty
        game = reset_game()
        played = self._reply_if_opponent_to_move(game, difficulty)

        stored_game, game_id = self.repo.create_game(game.to_model(difficulty))
        logger.info("Created game %s (difficulty: %s)", game_id, difficulty)
        return self._create_game_response(game_id, stored_game, played)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Destinations to highlight for the piece on the requested square."""
        game_model = self._fetch_game(request.game_id)
        game = GameState.from_model(game_model)
        square = _to_square(request.square)
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            color=game.turn,
            legal_moves=[_to_square_model(sq) for sq in game.legal_moves(square)],
        )

    def click(self, request: ClickRequest) -> GameResponse:
        """
        A square got clicked in the UI.
        ----
        Either selects a piece, completes a move (followed by the opponent's reply) or clears the selection.
        """
        game_model = self._fetch_game(request.game_id)
        game = GameState.from_model(game_model)
        difficulty = Difficulty(game_model.difficulty)

        played: list[AppliedMove] = []
        applied = game.click(_to_square(request.square))
        if applied is not None:
            played.append(applied)
            played.extend(self._reply_if_opponent_to_move(game, difficulty))

        return self._store(request.game_id, game, difficulty, played)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt, followed by the opponent's reply."""
        game_model = self._fetch_game(request.game_id)
        game = GameState.from_model(game_model)
        difficulty = Difficulty(game_model.difficulty)

        applied = game.make_move(
            _to_square(request.from_square), _to_square(request.to_square)
        )
        played = [applied, *self._reply_if_opponent_to_move(game, difficulty)]
        return self._store(request.game_id, game, difficulty, played)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Back to the starting position, keeping the game ID. The difficulty can be changed along the way."""
        game_model = self._fetch_game(request.game_id)
        difficulty = request.difficulty or Difficulty(game_model.difficulty)
        game = reset_game()
        played = self._reply_if_opponent_to_move(game, difficulty)
        logger.info("Reset game %s (difficulty: %s)", request.game_id, difficulty)
        return self._store(request.game_id, game, difficulty, played)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _reply_if_opponent_to_move(
        self, game: GameState, difficulty: Difficulty
    ) -> list[AppliedMove]:
        """The computer only ever plays a single move, and only when it is its turn and the game is still going."""
        if game.is_over or game.turn != self.settings.opponent_color:
            return []
        reply = game.play_opponent(difficulty, self.rng)
        return [reply] if reply else []

    def _store(
        self,
        game_id: UUID,
        game: GameState,
        difficulty: Difficulty,
        played: list[AppliedMove],
    ) -> GameResponse:
        """Capture updated state in GameModel, store it and build the response"""
        model = game.to_model(difficulty)
        if self.repo.update_game(game_id, model) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return self._create_game_response(game_id, model, played)

    def _create_game_response(
        self,
        game_id: UUID,
        model: GameModel,
        played: Optional[list[AppliedMove]] = None,
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = GameState.from_model(model)
        return GameResponse(
            game_id=game_id,
            board=game.board.to_rows(),
            turn=game.turn,
            status=game.status.status,
            winner=game.status.winner,
            in_check=game.status.in_check,
            difficulty=Difficulty(model.difficulty),
            selection=_to_square_model(game.selection) if game.selection else None,
            candidates=[_to_square_model(sq) for sq in game.candidate_destinations],
            moves_played=[_to_applied_move_response(move) for move in played or []],
            opponent_delay_ms=self.settings.opponent_delay_ms,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


def _to_square(model: SquareModel) -> Square:
    return Square(model.row, model.col)


def _to_square_model(square: Square) -> SquareModel:
    return SquareModel(row=square.row, col=square.col)


def _to_applied_move_response(applied: AppliedMove) -> AppliedMoveResponse:
    return AppliedMoveResponse(
        from_square=_to_square_model(applied.move.from_square),
        to_square=_to_square_model(applied.move.to_square),
        color=applied.moving_piece.color,
        piece=applied.moving_piece.kind,
        is_capture=applied.is_capture,
        promoted=applied.promoted,
    )
