"""The Game board: 64 cells that either hold a piece or are empty. Pure data plus accessors, the rules live in moves.py / rules.py"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from kingside.chess.pieces import Piece
from kingside.chess.square import BOARD_DIMENSIONS, Square
from kingside.core.shared_types import Color, PieceType

NUM_CELLS = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "/".join(["8"] * BOARD_DIMENSIONS[0])

Cells = list[Optional[Piece]]


def _empty_cells() -> Cells:
    return [None] * NUM_CELLS


@dataclass
class Board:
    cells: Cells = field(default_factory=_empty_cells)

    @classmethod
    def starting_position(cls) -> Self:
        """Two full back ranks, two pawn ranks and four empty ranks in between. Black on top (row 0), white at the bottom (row 7)."""
        return cls.from_fen(STARTING_PLACEMENT)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * the first group is row 0: black's back rank, read left to right
        * the second group is row 1: the black pawns
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        board = cls()
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    board.place_piece(Piece.from_fen(character), Square(row, col))
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return board

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def to_rows(self) -> list[list[Optional[str]]]:
        """Grid of FEN characters (None for an empty square). What a UI needs to draw the board."""
        return [
            [
                piece.to_fen() if (piece := self.piece(Square(row, col))) else None
                for col in range(BOARD_DIMENSIONS[1])
            ]
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def copy(self) -> Self:
        """Pieces are immutable, so copying the 64 cells is all a simulation needs."""
        return type(self)(list(self.cells))

    # --- ACCESSORS ---
    def piece(self, square: Square) -> Optional[Piece]:
        return self.cells[square.index]

    def is_empty(self, square: Square) -> bool:
        return self.cells[square.index] is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.cells[square.index] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Clear the square and hand back what stood on it"""
        removed = self.cells[square.index]
        self.cells[square.index] = None
        return removed

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Relocate whatever stands on from_square. Whatever stood on to_square is gone."""
        self.cells[to_square.index] = self.cells[from_square.index]
        self.cells[from_square.index] = None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for index, piece in enumerate(self.cells):
            if piece is not None:
                yield Square.from_index(index), piece

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square, piece in self.occupied() if piece.color == color]

    def locate_pieces(self, kind: PieceType, color: Color) -> list[Square]:
        target = Piece(kind, color)
        return [square for square, piece in self.occupied() if piece == target]

    def find_king(self, color: Color) -> Optional[Square]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {
            color: sum(piece.points for _, piece in self.occupied() if piece.color == color)
            for color in Color
        }
