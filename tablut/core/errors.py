from __future__ import annotations

from typing import Optional

from .square import Move


class TablutError(ValueError):
    pass


class IllegalMoveError(TablutError):
    def __init__(self, move: Move, reason: Optional[str] = None) -> None:
        self.move = move
        message = f"Illegal move {move}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MoveLimitError(TablutError):
    pass
