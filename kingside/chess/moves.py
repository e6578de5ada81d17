"""
Geometry/Base movement rules

Key idea: one function per piece type describing where it could go (pseudo-legal destinations).
Whether a destination leaves your own king in check is decided later by rules.py
"""

from dataclasses import dataclass
from typing import Optional, Protocol, assert_never

from kingside.chess.pieces import Piece
from kingside.chess.square import Square
from kingside.core.exceptions import InvalidSquareError
from kingside.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]  # (delta row, delta col)


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. Captures and promotions are inferred from the board when the move is applied."""

    from_square: Square
    to_square: Square


@dataclass(frozen=True)
class AppliedMove:
    """Snapshot of what happened when a move was applied. Only used for feedback (sounds, animations), carries no game state."""

    move: Move
    moving_piece: Piece
    captured_piece: Optional[Piece] = None
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None


# --- DIRECTIONS ---
STRAIGHTS: list[Vector] = [(1, 0), (0, 1), (-1, 0), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_JUMPS: list[Vector] = [
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
]
KING_STEPS: list[Vector] = STRAIGHTS + DIAGONALS

# White moves UP the board (towards row 0), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    """
    player_color = _color_on(square, board)

    destinations: list[Square] = []
    for d_row, d_col in directions:
        target_square = square.offset(d_row, d_col)
        while target_square.is_within_bounds():
            if not board.is_empty(target_square):
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if _color_on(target_square, board) != player_color:
                    destinations.append(target_square)
                break

            destinations.append(target_square)
            target_square = target_square.offset(d_row, d_col)
    return destinations


def single_step_move(
    square: Square, board: Board, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump to a fixed set of squares"""
    player_color = _color_on(square, board)

    destinations: list[Square] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        # empty squares and opponent pieces are both fine: a capture is just another move
        if board.is_empty(target_square) or _color_on(target_square, board) != player_color:
            destinations.append(target_square)
    return destinations


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting row) if both squares are empty
    - takes diagonally (only when there is something to take)

    NOTE: No en passant.
    """
    player_color = _color_on(square, board)
    direction = PAWN_DIRECTION[player_color]

    destinations: list[Square] = []
    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.is_empty(one_step):
        destinations.append(one_step)
        two_steps = square.offset(2 * direction, 0)
        if square.row == PAWN_START_ROW[player_color] and board.is_empty(two_steps):
            destinations.append(two_steps)

    for d_col in (-1, 1):
        target_square = square.offset(direction, d_col)
        if not target_square.is_within_bounds() or board.is_empty(target_square):
            continue
        if _color_on(target_square, board) != player_color:
            destinations.append(target_square)
    return destinations


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_JUMPS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(square: Square, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time. No castling.
    """
    return single_step_move(square, board, KING_STEPS)


def pseudo_legal_moves(square: Square, board: Board, color: Color) -> list[Square]:
    """
    Destinations allowed by the movement rules of the piece on `square`, ignoring whether the own king ends up in check.

    Empty if the square is empty or holds a piece of the other color.
    """
    if not square.is_within_bounds():
        raise InvalidSquareError(f"Square {square} is not on the board.")

    piece = board.piece(square)
    if piece is None or piece.color != color:
        return []

    match piece.kind:
        case PieceType.PAWN:
            return candidate_pawn_moves(square, board)
        case PieceType.KNIGHT:
            return candidate_knight_moves(square, board)
        case PieceType.BISHOP:
            return candidate_bishop_moves(square, board)
        case PieceType.ROOK:
            return candidate_rook_moves(square, board)
        case PieceType.QUEEN:
            return candidate_queen_moves(square, board)
        case PieceType.KING:
            return candidate_king_moves(square, board)
        case _:
            assert_never(piece.kind)


def is_promotion(piece: Piece, to_square: Square) -> bool:
    """A pawn reaching the far row becomes a queen"""
    return piece.kind == PieceType.PAWN and to_square.row == PROMOTION_ROW[piece.color]


def _color_on(square: Square, board: Board) -> Color:
    """Color of the piece on a square known to be occupied"""
    piece = board.piece(square)
    # for the type checker: only called on occupied squares
    assert piece is not None
    return piece.color
