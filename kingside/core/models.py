"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
SquareCoordinates = list[int]  # [row, col]
ColorName = str


@dataclass
class GameModel:
    """Transport-safe representation of a game session used between API, Service, DB, and Game layers."""

    placement: str
    turn: ColorName
    status: str
    difficulty: str
    winner: Optional[ColorName] = None
    selection: Optional[SquareCoordinates] = None
    candidates: list[SquareCoordinates] = field(default_factory=list)
