"""Protocol repository (SQLAlchemy implementation in sql_repository.py, tests use a dictionary)"""

from typing import Protocol
from uuid import UUID

from kingside.core.models import GameModel


class GameRepository(Protocol):
    """Where game sessions (position, side to move, selection, difficulty) are kept between requests"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Load a session snapshot, or None when the id is unknown."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Open a new session and hand back the snapshot with its freshly assigned id."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite a session after a click, a move or a reset. None when the id is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop a session and return its last snapshot."""
        ...
