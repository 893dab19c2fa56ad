from __future__ import annotations

from typing import Callable, Dict

from tablut.core import BOARD_SIZE, DIRECTIONS, ROOK_SQUARES, Board, Piece, Side

# Positive scores favour the defenders, negative scores the attackers.
INFINITY = 2**31 - 1
WINNING_VALUE = INFINITY - 20
NEUTRAL_SCORE = 0

MATERIAL_WEIGHT = 100
KING_OPEN_LINE_BONUS = 500
KING_EDGE_DISTANCE_PENALTY = 20
KING_PRESSURE_PENALTY = 50

Evaluator = Callable[[Board], int]


def decided_score(board: Board) -> int:
    """Sentinel for a finished game, or 0 while nobody has won."""
    if board.winner is Side.DEFENDERS:
        return WINNING_VALUE
    if board.winner is Side.ATTACKERS:
        return -WINNING_VALUE
    king = board.king_position()
    if king is None:
        return -WINNING_VALUE
    if king.is_edge:
        return WINNING_VALUE
    return 0


def flat_evaluate(board: Board) -> int:
    """Placeholder heuristic: decided positions, else a single material test.

    Any position where attackers outnumber defenders is scored as an attacker
    win; everything else is neutral.
    """
    score = decided_score(board)
    if score:
        return score
    if board.count_side(Side.ATTACKERS) > board.count_side(Side.DEFENDERS):
        return -WINNING_VALUE
    return NEUTRAL_SCORE


def material_evaluate(board: Board) -> int:
    """Material balance plus king mobility and pressure."""
    score = decided_score(board)
    if score:
        return score
    king = board.king_position()
    assert king is not None

    defenders = board.count_side(Side.DEFENDERS) - 1
    attackers = board.count_side(Side.ATTACKERS)
    # Defenders start eight against sixteen, so each counts double.
    score = MATERIAL_WEIGHT * (2 * defenders - attackers)

    for direction in range(len(DIRECTIONS)):
        ray = ROOK_SQUARES[king.index][direction]
        if all(board.grid[s.row, s.col] == Piece.EMPTY for s in ray):
            score += KING_OPEN_LINE_BONUS
        if ray and board.grid[ray[0].row, ray[0].col] == Piece.ATTACKER:
            score -= KING_PRESSURE_PENALTY

    far = BOARD_SIZE - 1
    edge_distance = min(king.col, king.row, far - king.col, far - king.row)
    score -= KING_EDGE_DISTANCE_PENALTY * edge_distance
    return score


EVALUATORS: Dict[str, Evaluator] = {
    "flat": flat_evaluate,
    "material": material_evaluate,
}


def get_evaluator(name: str) -> Evaluator:
    try:
        return EVALUATORS[name]
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}; expected one of {sorted(EVALUATORS)}.") from None
