"""Minimax move selection."""

from .evaluation import (
    EVALUATORS,
    INFINITY,
    NEUTRAL_SCORE,
    WINNING_VALUE,
    flat_evaluate,
    get_evaluator,
    material_evaluate,
)
from .minimax import AlphaBetaSearch, SearchConfig, SearchResult, select_move

__all__ = [
    "EVALUATORS",
    "INFINITY",
    "NEUTRAL_SCORE",
    "WINNING_VALUE",
    "flat_evaluate",
    "get_evaluator",
    "material_evaluate",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "select_move",
]
