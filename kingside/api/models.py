"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from kingside.chess.square import BOARD_DIMENSIONS
from kingside.core.exceptions import InvalidRequestError
from kingside.core.shared_types import Color, Difficulty, PieceType, Status

PieceCode = Optional[str]  # FEN character, None for an empty square


class SquareModel(BaseModel):
    row: int
    col: int

    @field_validator("row", "col")
    @classmethod
    def validate_on_board(cls, value: int) -> int:
        # the board is square, so one bound covers both coordinates
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board. Must lie in [0, {BOARD_DIMENSIONS[0]})."
            )
        return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    difficulty: Optional[Difficulty] = None


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class ClickRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareModel
    to_square: SquareModel


class ResetGameRequest(BaseModel):
    game_id: UUID
    difficulty: Optional[Difficulty] = None


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class AppliedMoveResponse(BaseModel):
    """What the UI needs to pick a sound / animate the destination square"""

    from_square: SquareModel
    to_square: SquareModel
    color: Color
    piece: PieceType
    is_capture: bool
    promoted: bool


class GameResponse(BaseModel):
    game_id: UUID
    board: list[list[PieceCode]]
    turn: Color
    status: Status
    winner: Optional[Color]
    in_check: bool
    difficulty: Difficulty
    selection: Optional[SquareModel]
    candidates: list[SquareModel]
    moves_played: list[AppliedMoveResponse]
    opponent_delay_ms: int


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareModel
    color: Color
    legal_moves: list[SquareModel]
