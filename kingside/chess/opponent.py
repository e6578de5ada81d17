"""
The computer opponent
----

Three strategies, picked by Difficulty:
* EASY: any legal move, uniformly at random
* MEDIUM: a random capture if there is one, otherwise like EASY
* HARD: look one move ahead and take the move with the best material score. First move found wins ties.
"""

import logging
import random
from typing import Optional, assert_never

from kingside.chess.board import Board
from kingside.chess.evaluation import score_for
from kingside.chess.moves import Move
from kingside.chess.rules import all_legal_moves, apply_move
from kingside.core.shared_types import Color, Difficulty

logger = logging.getLogger(__name__)


def choose_move(
    board: Board,
    color: Color,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """
    Pick a move for `color`. Returns None when there is nothing to play (the game should already be over then).

    `rng` can be injected to make the random strategies reproducible.
    """
    rng = rng or random.Random()
    moves = all_legal_moves(board, color)
    if not moves:
        logger.debug("No legal moves for %s, opponent passes", color)
        return None

    match difficulty:
        case Difficulty.EASY:
            move = random_move(moves, rng)
        case Difficulty.MEDIUM:
            move = capture_biased_move(moves, board, rng)
        case Difficulty.HARD:
            move = greedy_move(moves, board, color)
        case _:
            assert_never(difficulty)

    logger.debug(
        "Opponent (%s, %s) picked %s -> %s out of %d moves",
        color,
        difficulty,
        move.from_square.to_algebraic(),
        move.to_square.to_algebraic(),
        len(moves),
    )
    return move


def random_move(moves: list[Move], rng: random.Random) -> Move:
    return rng.choice(moves)


def capture_biased_move(moves: list[Move], board: Board, rng: random.Random) -> Move:
    """Prefer taking something, no matter what"""
    captures = [move for move in moves if not board.is_empty(move.to_square)]
    return rng.choice(captures) if captures else random_move(moves, rng)


def greedy_move(moves: list[Move], board: Board, color: Color) -> Move:
    """
    One-ply search
    ---

    Every move is played out fully on a copy of the board (promotion included) and the resulting material score is compared.
    Only a strictly better score replaces the current best, so the first move found wins ties.
    """
    best_move = moves[0]
    best_score: Optional[int] = None
    for move in moves:
        simulation = board.copy()
        apply_move(simulation, move.from_square, move.to_square)
        move_score = score_for(simulation, color)
        if best_score is None or move_score > best_score:
            best_score = move_score
            best_move = move
    return best_move
