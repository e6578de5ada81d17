"""Unit tests for kingside/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from kingside.chess.board import STARTING_PLACEMENT
from kingside.core.shared_types import Status
from kingside.db.sql_repository import GameModel, SQLGameRepository


def make_model(**overrides) -> GameModel:
    data = dict(
        placement=STARTING_PLACEMENT,
        turn="white",
        status=Status.ONGOING.value,
        difficulty="hard",
        winner=None,
        selection=[6, 4],
        candidates=[[5, 4], [4, 4]],
    )
    data.update(overrides)
    return GameModel(**data)


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = make_model()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(make_model())
    assert repo.get_game(game_id) == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """Should return None if ID does not match anything in database."""
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    repo.create_game(make_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(make_model())

    finished = make_model(
        turn="white",
        status=Status.CHECKMATE.value,
        winner="black",
        selection=None,
        candidates=[],
    )
    updated = repo.update_game(game_id, finished)
    assert updated == finished
    assert repo.get_game(game_id) == finished


def test_update_unknown_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), make_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    model, game_id = repo.create_game(make_model())
    assert repo.delete_game(game_id) == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None
