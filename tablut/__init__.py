"""Tablut rules engine and minimax player."""

from . import core, env, evaluation, features, search
from .core import Board, IllegalMoveError, Move, MoveLimitError, Piece, Side, Square
from .env import TablutEnv
from .evaluation import RandomPlayer, SearchPlayer, evaluate_players, play_game
from .search import AlphaBetaSearch, SearchConfig, SearchResult, select_move

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "Board",
    "IllegalMoveError",
    "Move",
    "MoveLimitError",
    "Piece",
    "Side",
    "Square",
    "TablutEnv",
    "RandomPlayer",
    "SearchPlayer",
    "evaluate_players",
    "play_game",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "select_move",
]
