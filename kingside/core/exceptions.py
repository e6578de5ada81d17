"""Custom exceptions. All inherit from GameError so the service layer can catch them in one go."""


class GameError(Exception):
    """Base class for everything that can go wrong while playing a game."""


class InvalidSquareError(GameError):
    """Coordinates outside of the board were handed to the move generator. Programming error."""


class MissingKingError(GameError):
    """Check detection on a board without a king of the requested color. Only happens with a malformed board."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action."""


class IllegalMoveError(GameError):
    """The requested move is not among the legal moves of the piece."""


class RepositoryError(GameError):
    """Record could not be found / stored."""


class InvalidRequestError(GameError, ValueError):
    """Request data could not be interpreted.

    NOTE: Also a ValueError, so that pydantic validators turn it into a ValidationError.
    """
