"""Defines the types of chess pieces"""

from dataclasses import dataclass
from typing import Self

from kingside.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 100,
}


@dataclass(frozen=True)
class Piece:
    kind: PieceType
    color: Color

    @property
    def points(self) -> int:
        return PIECE_POINTS[self.kind]

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        kind = FEN_TO_PIECE[character.lower()]
        return cls(kind, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.kind].lower()
        )
