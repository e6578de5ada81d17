"""
Application settings.

Everything lives in process memory by default: the database URL points at an in-memory SQLite database.
Values can be overridden through environment variables prefixed with KINGSIDE_ (ex. KINGSIDE_OPPONENT_DELAY_MS=0).
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Self

from kingside.core.shared_types import Color, Difficulty

ENV_PREFIX = "KINGSIDE_"


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite://"
    """SQLAlchemy URL of the session store"""

    echo_sql: bool = False
    """Log every SQL statement (SQLAlchemy `echo`)"""

    default_difficulty: Difficulty = Difficulty.EASY
    """Opponent strength used when a new game does not specify one"""

    opponent_color: Color = Color.BLACK
    """The computer always plays this side, the human the other one"""

    opponent_delay_ms: int = 300
    """Pause the UI should leave between the human move and the opponent's reply. The engine itself never waits."""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Build settings from KINGSIDE_* variables, falling back to the defaults above."""
        environ = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for setting in fields(cls):
            raw = environ.get(f"{ENV_PREFIX}{setting.name.upper()}")
            if raw is None:
                continue
            overrides[setting.name] = _parse(setting.name, raw)
        return cls(**overrides)


def _parse(name: str, raw: str) -> object:
    """Convert the raw environment string into the type of the setting"""
    match name:
        case "echo_sql":
            return raw.strip().lower() in ("1", "true", "yes", "on")
        case "default_difficulty":
            return Difficulty(raw.strip().lower())
        case "opponent_color":
            return Color(raw.strip().lower())
        case "opponent_delay_ms":
            return int(raw)
        case "log_level":
            return raw.strip().upper()
        case _:
            return raw
