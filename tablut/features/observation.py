from __future__ import annotations

from typing import Tuple

import numpy as np

from tablut.core import BOARD_SIZE, THRONE, Board, Piece, Side

BOARD_CHANNELS = 4  # attackers, defenders, king, throne
AUX_VECTOR_SIZE = 3  # side to move one-hot (2) + repeated-position flag


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board planes with shape (4, 9, 9), channel-first, indexed [row, col]."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = board.grid == int(Piece.ATTACKER)
    tensor[1] = board.grid == int(Piece.DEFENDER)
    tensor[2] = board.grid == int(Piece.KING)
    tensor[3, THRONE.row, THRONE.col] = 1.0
    return tensor


def build_aux_vector(board: Board) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0 if board.turn is Side.ATTACKERS else 1] = 1.0
    aux[2] = float(board.repeated)
    return aux


def board_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(board), build_aux_vector(board)
