"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (rows, columns). Row 0 is black's back rank, row 7 is white's back rank
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Inverse of `index`"""
        row, col = divmod(index, BOARD_DIMENSIONS[1])
        return cls(row, col)

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Square names: 'a8' is (0, 0), 'h1' is (7, 7). White sits at the bottom (row 7)."""
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    @property
    def index(self) -> int:
        """Position of the square in the row-major cell array of the Board"""
        return self.row * BOARD_DIMENSIONS[1] + self.col

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by the given vector. May lie off the board: check with `is_within_bounds()`"""
        return Square(self.row + d_row, self.col + d_col)
