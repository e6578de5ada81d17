"""Unit tests for kingside/core/config.py"""

import pytest

from kingside.core.config import Settings
from kingside.core.shared_types import Color, Difficulty


def test_defaults_keep_everything_in_memory() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.database_url == "sqlite://"
    assert settings.opponent_color == Color.BLACK
    assert settings.default_difficulty == Difficulty.EASY
    assert settings.opponent_delay_ms == 300


def test_environment_overrides() -> None:
    settings = Settings.from_env(
        {
            "KINGSIDE_DATABASE_URL": "sqlite:///games.db",
            "KINGSIDE_ECHO_SQL": "true",
            "KINGSIDE_DEFAULT_DIFFICULTY": "Hard",
            "KINGSIDE_OPPONENT_COLOR": "white",
            "KINGSIDE_OPPONENT_DELAY_MS": "0",
            "KINGSIDE_LOG_LEVEL": "debug",
            "UNRELATED": "ignored",
        }
    )
    assert settings.database_url == "sqlite:///games.db"
    assert settings.echo_sql is True
    assert settings.default_difficulty == Difficulty.HARD
    assert settings.opponent_color == Color.WHITE
    assert settings.opponent_delay_ms == 0
    assert settings.log_level == "DEBUG"


def test_unknown_difficulty_in_environment() -> None:
    with pytest.raises(ValueError):
        Settings.from_env({"KINGSIDE_DEFAULT_DIFFICULTY": "expert"})
