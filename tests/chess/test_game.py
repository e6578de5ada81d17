"""Unit tests for /kingside/chess/game.py"""

import random

import pytest

from kingside.chess.board import STARTING_PLACEMENT, Board
from kingside.chess.game import GameState, reset_game
from kingside.chess.pieces import Piece
from kingside.chess.square import Square
from kingside.core.exceptions import GameStateError, IllegalMoveError
from kingside.core.models import GameModel
from kingside.core.shared_types import Color, Difficulty, PieceType, Status

FOOLS_MATE = [("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")]


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def names(squares: list[Square]) -> set[str]:
    return {square.to_algebraic() for square in squares}


def play(game: GameState, moves: list[tuple[str, str]]) -> None:
    for from_name, to_name in moves:
        game.make_move(sq(from_name), sq(to_name))


# -- CREATION LOGIC --
def test_new_game() -> None:
    game = reset_game()
    assert game.board.to_fen() == STARTING_PLACEMENT
    assert game.turn == Color.WHITE
    assert game.selection is None
    assert game.candidate_destinations == []
    assert game.status.status == Status.ONGOING
    assert game.last_move is None


def test_reset_gives_a_fresh_game() -> None:
    game = reset_game()
    play(game, FOOLS_MATE[:2])
    assert reset_game() == GameState.new_game()
    assert reset_game().board.to_fen() == STARTING_PLACEMENT


# -- LEGAL MOVES --
def test_legal_moves_for_side_to_move_only() -> None:
    game = reset_game()
    assert names(game.legal_moves(sq("e2"))) == {"e3", "e4"}
    assert game.legal_moves(sq("e7")) == []


# -- MAKING MOVES --
def test_make_move_flips_turn() -> None:
    game = reset_game()
    applied = game.make_move(sq("e2"), sq("e4"))
    assert game.turn == Color.BLACK
    assert game.board.piece(sq("e4")) == Piece(PieceType.PAWN, Color.WHITE)
    assert game.last_move == applied
    assert not applied.is_capture

    game.make_move(sq("d7"), sq("d5"))
    assert game.turn == Color.WHITE

    applied = game.make_move(sq("e4"), sq("d5"))
    assert applied.is_capture
    assert game.turn == Color.BLACK


def test_illegal_move_rejected() -> None:
    game = reset_game()
    with pytest.raises(IllegalMoveError):
        game.make_move(sq("e2"), sq("e5"))
    # moving the opponent's piece is not allowed either
    with pytest.raises(IllegalMoveError):
        game.make_move(sq("e7"), sq("e5"))
    assert game.board.to_fen() == STARTING_PLACEMENT
    assert game.turn == Color.WHITE


def test_fools_mate() -> None:
    game = reset_game()
    play(game, FOOLS_MATE)
    assert game.status.status == Status.CHECKMATE
    assert game.status.winner == Color.BLACK
    assert game.status.in_check
    assert game.is_over


def test_no_moves_after_the_game_ended() -> None:
    game = reset_game()
    play(game, FOOLS_MATE)
    with pytest.raises(GameStateError):
        game.make_move(sq("a2"), sq("a3"))
    with pytest.raises(GameStateError):
        game.click(sq("a2"))


def test_check_is_reported() -> None:
    game = reset_game()
    play(game, [("e2", "e4"), ("f7", "f6"), ("d1", "h5")])
    assert game.status.status == Status.ONGOING
    assert game.status.in_check


def test_promotion_through_game() -> None:
    board = Board.from_fen("7k/P7/8/8/8/8/8/4K3")
    game = GameState(board=board)
    applied = game.make_move(sq("a7"), sq("a8"))
    assert applied.promoted
    assert game.board.piece(sq("a8")) == Piece(PieceType.QUEEN, Color.WHITE)


# -- CLICKS --
def test_click_own_piece_selects_it() -> None:
    game = reset_game()
    assert game.click(sq("e2")) is None
    assert game.selection == sq("e2")
    assert names(game.candidate_destinations) == {"e3", "e4"}


def test_click_candidate_completes_move() -> None:
    game = reset_game()
    game.click(sq("g1"))
    applied = game.click(sq("f3"))
    assert applied is not None
    assert applied.move.to_square == sq("f3")
    assert game.turn == Color.BLACK
    assert game.selection is None
    assert game.candidate_destinations == []


def test_click_other_own_piece_switches_selection() -> None:
    game = reset_game()
    game.click(sq("e2"))
    game.click(sq("b1"))
    assert game.selection == sq("b1")
    assert names(game.candidate_destinations) == {"a3", "c3"}


@pytest.mark.parametrize("target", ["e7", "e5", "e6"])
def test_invalid_click_clears_selection(target: str) -> None:
    """Opponent piece, or an empty square that is not a destination"""
    game = reset_game()
    game.click(sq("e2"))
    assert game.click(sq(target)) is None
    assert game.selection is None
    assert game.candidate_destinations == []
    assert game.turn == Color.WHITE


# -- OPPONENT --
def test_play_opponent() -> None:
    game = reset_game()
    game.make_move(sq("e2"), sq("e4"))
    applied = game.play_opponent(Difficulty.EASY, random.Random(1))
    assert applied is not None
    assert applied.moving_piece.color == Color.BLACK
    assert game.turn == Color.WHITE


def test_play_opponent_hard_takes_material() -> None:
    game = GameState(board=Board.from_fen("r6k/8/8/8/Q7/8/8/7K"), turn=Color.BLACK)
    applied = game.play_opponent(Difficulty.HARD)
    assert applied is not None
    assert applied.is_capture
    assert applied.move.to_square == sq("a4")


def test_play_opponent_after_game_over_does_nothing() -> None:
    game = reset_game()
    play(game, FOOLS_MATE)
    fen = game.board.to_fen()
    assert game.play_opponent(Difficulty.HARD) is None
    assert game.board.to_fen() == fen


# -- CONVERSION TO / FROM MODEL --
def test_model_roundtrip() -> None:
    game = reset_game()
    game.make_move(sq("e2"), sq("e4"))
    game.click(sq("g8"))

    model = game.to_model(Difficulty.MEDIUM)
    assert model.turn == "black"
    assert model.status == "ongoing"
    assert model.difficulty == "medium"
    assert model.selection == [0, 6]
    assert sorted(model.candidates) == [[2, 5], [2, 7]]

    restored = GameState.from_model(model)
    assert restored.board == game.board
    assert restored.turn == game.turn
    assert restored.selection == game.selection
    assert restored.candidate_destinations == game.candidate_destinations
    assert restored.status == game.status


def test_model_roundtrip_after_checkmate() -> None:
    game = reset_game()
    play(game, FOOLS_MATE)
    restored = GameState.from_model(game.to_model(Difficulty.EASY))
    assert restored.status == game.status
    assert restored.is_over


def test_from_model_invalid_status() -> None:
    model = GameModel(
        placement=STARTING_PLACEMENT,
        turn="white",
        status="abandoned",
        difficulty="easy",
    )
    with pytest.raises(GameStateError):
        GameState.from_model(model)
