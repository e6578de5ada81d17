"""
Rules that need more than the geometry of a single piece:

* check detection
* the legality filter (a move may not leave your own king in check)
* applying a move (incl. promotion)
* end of game detection (checkmate / stalemate)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from kingside.chess.board import Board
from kingside.chess.moves import AppliedMove, Move, is_promotion, pseudo_legal_moves
from kingside.chess.pieces import Piece
from kingside.chess.square import Square
from kingside.core.exceptions import MissingKingError
from kingside.core.shared_types import Color, PieceType, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStatus:
    status: Status
    winner: Optional[Color] = None
    in_check: bool = False

    @property
    def is_over(self) -> bool:
        return self.status != Status.ONGOING


# --- CHECK DETECTOR ---
def is_in_check(board: Board, color: Color) -> bool:
    """
    Is the king of `color` attacked?
    ----

    A king is attacked if it stands on one of the pseudo-legal destinations of any opponent piece.
    Only the raw movement rules are used here (never the legality filter) so there is no recursion.
    """
    king_square = board.find_king(color)
    if king_square is None:
        raise MissingKingError(f"No {color} king on the board: {board.to_fen()}")

    opponent = color.opponent
    return any(
        king_square in pseudo_legal_moves(square, board, opponent)
        for square in board.locate_color(opponent)
    )


# --- LEGALITY FILTER ---
def legal_moves(square: Square, board: Board, color: Color) -> list[Square]:
    """
    Legal destinations for the piece on `square`
    ----

    plan:
    1. generate the pseudo-legal destinations
    2. for every destination: copy the board and relocate the piece (no promotion, no turn change)
    3. keep it if your own king is not in check on the copy
    """
    return [
        to_square
        for to_square in pseudo_legal_moves(square, board, color)
        if not _is_putting_yourself_in_check(board, square, to_square, color)
    ]


def all_legal_moves(board: Board, color: Color) -> list[Move]:
    """Every legal move of `color`, scanning the board row by row"""
    moves: list[Move] = []
    for from_square in board.locate_color(color):
        moves.extend(
            Move(from_square, to_square)
            for to_square in legal_moves(from_square, board, color)
        )
    return moves


def has_legal_move(board: Board, color: Color) -> bool:
    return any(legal_moves(square, board, color) for square in board.locate_color(color))


def _is_putting_yourself_in_check(
    board: Board, from_square: Square, to_square: Square, color: Color
) -> bool:
    simulation = board.copy()
    simulation.move_piece(from_square, to_square)
    return is_in_check(simulation, color)


# --- MOVE APPLIER ---
def apply_move(board: Board, from_square: Square, to_square: Square) -> AppliedMove:
    """
    Update the board in place.
    ---

    NOTE: Legality is NOT checked again here. The caller is responsible for only passing legal moves.
    NOTE: The turn is owned by GameState, which flips it after calling this.

    A pawn reaching the far row always becomes a queen.
    """
    moving_piece = board.piece(from_square)
    # for the type checker: a legal move always starts from an occupied square
    assert moving_piece is not None

    captured_piece = board.remove_piece(to_square)
    promoted = is_promotion(moving_piece, to_square)
    board.remove_piece(from_square)
    board.place_piece(
        Piece(PieceType.QUEEN, moving_piece.color) if promoted else moving_piece,
        to_square,
    )
    return AppliedMove(
        move=Move(from_square, to_square),
        moving_piece=moving_piece,
        captured_piece=captured_piece,
        promoted=promoted,
    )


# --- CHECKS FOR ENDING THE GAME ---
def game_status(board: Board, color_to_move: Color) -> GameStatus:
    """
    The only place where the end of the game is decided.

    No legal move left:
    * in check -> checkmate, the opponent wins
    * otherwise -> stalemate
    """
    in_check = is_in_check(board, color_to_move)
    if has_legal_move(board, color_to_move):
        return GameStatus(Status.ONGOING, in_check=in_check)

    if in_check:
        logger.info("Checkmate. %s wins", color_to_move.opponent)
        return GameStatus(Status.CHECKMATE, winner=color_to_move.opponent, in_check=True)

    logger.info("Stalemate. %s has no legal move", color_to_move)
    return GameStatus(Status.STALEMATE)
