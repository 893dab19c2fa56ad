from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .square import Move, Square

BoardArray = NDArray[np.int8]


class Piece(IntEnum):
    EMPTY = 0
    ATTACKER = 1
    DEFENDER = 2
    KING = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


class Side(Enum):
    ATTACKERS = "attackers"
    DEFENDERS = "defenders"

    def opponent(self) -> "Side":
        return Side.DEFENDERS if self is Side.ATTACKERS else Side.ATTACKERS

    @property
    def symbol(self) -> str:
        return "B" if self is Side.ATTACKERS else "W"


_SYMBOLS = {Piece.EMPTY: "-", Piece.ATTACKER: "B", Piece.DEFENDER: "W", Piece.KING: "K"}


def side_of(piece: int) -> Optional[Side]:
    """Map a cell value to the side controlling it (None for empty)."""
    if piece == Piece.ATTACKER:
        return Side.ATTACKERS
    if piece == Piece.DEFENDER or piece == Piece.KING:
        return Side.DEFENDERS
    return None


def is_king(piece: int) -> bool:
    return piece == Piece.KING


def is_empty(piece: int) -> bool:
    return piece == Piece.EMPTY


@dataclass(frozen=True)
class CaptureRecord:
    square: Square
    piece: Piece


@dataclass(frozen=True)
class HistoryEntry:
    move: Move
    prior_signature: bytes
    captures: Tuple[CaptureRecord, ...] = field(default_factory=tuple)
    prior_winner: Optional[Side] = None
    prior_repeated: bool = False
