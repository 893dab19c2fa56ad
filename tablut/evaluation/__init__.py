"""Match play between Tablut players."""

from .match import (
    GameRecord,
    MatchResult,
    Player,
    RandomPlayer,
    SearchPlayer,
    evaluate_players,
    play_game,
)

__all__ = [
    "GameRecord",
    "MatchResult",
    "Player",
    "RandomPlayer",
    "SearchPlayer",
    "evaluate_players",
    "play_game",
]
