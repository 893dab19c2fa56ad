"""Core game logic for Tablut."""

from .errors import IllegalMoveError, MoveLimitError, TablutError
from .square import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    DIRECTIONS,
    ROOK_MOVES,
    ROOK_SQUARES,
    SQUARE_LIST,
    Move,
    Square,
    decode_move,
    encode_move,
    sq,
)
from .state import CaptureRecord, HistoryEntry, Piece, Side, is_empty, is_king, side_of
from .board import (
    INITIAL_ATTACKERS,
    INITIAL_DEFENDERS,
    THRONE,
    THRONE_NEIGHBOURS,
    Board,
)

__all__ = [
    "ACTION_VECTOR_SIZE",
    "BOARD_SIZE",
    "DIRECTIONS",
    "ROOK_MOVES",
    "ROOK_SQUARES",
    "SQUARE_LIST",
    "Move",
    "Square",
    "decode_move",
    "encode_move",
    "sq",
    "CaptureRecord",
    "HistoryEntry",
    "Piece",
    "Side",
    "is_empty",
    "is_king",
    "side_of",
    "INITIAL_ATTACKERS",
    "INITIAL_DEFENDERS",
    "THRONE",
    "THRONE_NEIGHBOURS",
    "Board",
    "TablutError",
    "IllegalMoveError",
    "MoveLimitError",
]
