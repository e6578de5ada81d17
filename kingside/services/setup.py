"""Wire the layers together: settings -> logging -> database -> repository -> service."""

import random
from typing import Optional

from kingside.core.config import Settings
from kingside.core.log import configure_logging
from kingside.db.database import build_session_factory
from kingside.db.sql_repository import SQLGameRepository
from kingside.services.chess_service import ChessService


def create_chess_service(
    settings: Optional[Settings] = None, rng: Optional[random.Random] = None
) -> ChessService:
    """Entrypoint for a UI: one service backed by one database session for the whole session of play."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    session_factory = build_session_factory(settings)
    repository = SQLGameRepository(session_factory())
    return ChessService(repository, settings, rng)
