"""Material-only evaluation used by the computer opponent."""

from kingside.chess.board import Board
from kingside.core.shared_types import Color

# Black counts positive, white negative.
SIGN: dict[Color, int] = {Color.BLACK: 1, Color.WHITE: -1}


def score(board: Board) -> int:
    """Black material minus white material (king included: 100). No positional terms."""
    material = board.count_material()
    return material[Color.BLACK] - material[Color.WHITE]


def score_for(board: Board, color: Color) -> int:
    """The same score, seen from `color`'s side: higher is better for `color`."""
    return SIGN[color] * score(board)
