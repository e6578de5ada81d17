"""
The GameState class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Self

from kingside.chess.board import Board
from kingside.chess.moves import AppliedMove, Move
from kingside.chess.opponent import choose_move
from kingside.chess.rules import (
    GameStatus,
    apply_move,
    game_status,
    is_in_check,
    legal_moves,
)
from kingside.chess.square import Square
from kingside.core.exceptions import GameStateError, IllegalMoveError
from kingside.core.models import GameModel
from kingside.core.shared_types import Color, Difficulty, Status

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color = Color.WHITE
    selection: Optional[Square] = None
    candidate_destinations: list[Square] = field(default_factory=list)
    status: GameStatus = field(default_factory=lambda: GameStatus(Status.ONGOING))
    last_move: Optional[AppliedMove] = None

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(board=Board.starting_position())

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(Status)}"
            )

        board = Board.from_fen(model.placement)
        turn = Color(model.turn)
        status = Status(model.status)
        winner = Color(model.winner) if model.winner else None
        in_check = status != Status.STALEMATE and is_in_check(board, turn)
        selection = Square(*model.selection) if model.selection else None
        candidates = [Square(row, col) for row, col in model.candidates]
        return cls(
            board=board,
            turn=turn,
            selection=selection,
            candidate_destinations=candidates,
            status=GameStatus(status, winner=winner, in_check=in_check),
        )

    def to_model(self, difficulty: Difficulty) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            placement=self.board.to_fen(),
            turn=self.turn.value,
            status=self.status.status.value,
            difficulty=difficulty.value,
            winner=self.status.winner.value if self.status.winner else None,
            selection=[self.selection.row, self.selection.col]
            if self.selection
            else None,
            candidates=[[sq.row, sq.col] for sq in self.candidate_destinations],
        )

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def legal_moves(self, square: Square) -> list[Square]:
        """Legal destinations of the piece on `square` for the side to move. Empty for empty squares / opponent pieces."""
        return legal_moves(square, self.board, self.turn)

    def click(self, square: Square) -> Optional[AppliedMove]:
        """
        A square got clicked
        ----

        1. Something is selected and the square is one of its destinations? --> make the move
        2. The square holds one of your pieces? --> select it and compute where it can go
        3. Anything else --> clear the selection

        Returns the applied move if the click completed one.
        """
        if self.is_over:
            raise GameStateError(f"Game is over. status: {self.status.status}")

        if self.selection is not None and square in self.candidate_destinations:
            return self.make_move(self.selection, square)

        piece = self.board.piece(square)
        if piece is not None and piece.color == self.turn:
            self.selection = square
            self.candidate_destinations = self.legal_moves(square)
        else:
            self._clear_selection()
        return None

    def make_move(self, from_square: Square, to_square: Square) -> AppliedMove:
        """
        Attempt to make a move
        -----

        1. make sure the game is still going and the move is legal
        2. update the board (incl. promotion)
        3. hand the turn to the other side
        4. update game status (checkmate / stalemate of the side that moves next)
        """
        if self.is_over:
            raise GameStateError(f"Game is over. status: {self.status.status}")

        if to_square not in self.legal_moves(from_square):
            raise IllegalMoveError(
                f"Move not allowed: {from_square.to_algebraic()} -> {to_square.to_algebraic()}"
            )

        applied = apply_move(self.board, from_square, to_square)
        self.last_move = applied
        self.turn = self.turn.opponent
        self._clear_selection()
        self.status = game_status(self.board, self.turn)

        logger.info(
            "%s %s %s -> %s%s%s",
            applied.moving_piece.color,
            applied.moving_piece.kind,
            from_square.to_algebraic(),
            to_square.to_algebraic(),
            " (capture)" if applied.is_capture else "",
            " (promotion)" if applied.promoted else "",
        )
        return applied

    def play_opponent(
        self, difficulty: Difficulty, rng: Optional[random.Random] = None
    ) -> Optional[AppliedMove]:
        """Let the computer play a move for the side to move. Does nothing once the game is over."""
        if self.is_over:
            return None

        move: Optional[Move] = choose_move(self.board, self.turn, difficulty, rng)
        if move is None:
            return None
        return self.make_move(move.from_square, move.to_square)

    # -- PRIVATE HELPERS ---
    def _clear_selection(self) -> None:
        self.selection = None
        self.candidate_destinations = []


def reset_game() -> GameState:
    """Back to the standard starting position."""
    return GameState.new_game()
