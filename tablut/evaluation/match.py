from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from tablut.core import Board, Move, Side
from tablut.search import AlphaBetaSearch, SearchConfig

logger = logging.getLogger(__name__)


class Player:
    """Chooses a move for the side to move on a board it must not modify."""

    def choose(self, board: Board) -> Move:
        raise NotImplementedError


class RandomPlayer(Player):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, board: Board) -> Move:
        moves = board.legal_moves()
        if not moves:
            raise ValueError("No legal moves available.")
        return moves[int(self.rng.integers(len(moves)))]


class SearchPlayer(Player):
    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.search = AlphaBetaSearch(config)

    def choose(self, board: Board) -> Move:
        move = self.search.select_move(board)
        if move is None:
            raise ValueError("Search found no move.")
        return move


@dataclass
class GameRecord:
    winner: Optional[Side]
    moves: List[Move] = field(default_factory=list)
    repeated: bool = False

    def notation(self) -> List[str]:
        return [str(move) for move in self.moves]


@dataclass
class MatchResult:
    games_played: int
    attacker_wins: int
    defender_wins: int
    unfinished: int
    average_length: float

    def winrate_attackers(self) -> float:
        return self.attacker_wins / max(1, self.games_played)

    def winrate_defenders(self) -> float:
        return self.defender_wins / max(1, self.games_played)


def play_game(
    attackers: Player,
    defenders: Player,
    *,
    move_limit: Optional[int] = None,
    board: Optional[Board] = None,
) -> GameRecord:
    board = board or Board()
    if move_limit is not None:
        board.set_move_limit(move_limit)

    record = GameRecord(winner=None)
    while board.outcome() is None and not board.limit_reached():
        player = attackers if board.turn is Side.ATTACKERS else defenders
        move = player.choose(board)
        board.apply_move(move)
        record.moves.append(move)

    record.winner = board.outcome()
    record.repeated = board.repeated
    logger.info(
        "game over after %d moves: %s",
        len(record.moves),
        record.winner.value if record.winner else "unfinished",
    )
    return record


def evaluate_players(
    attackers: Player,
    defenders: Player,
    *,
    games: int,
    move_limit: Optional[int] = 100,
) -> MatchResult:
    attacker_wins = 0
    defender_wins = 0
    unfinished = 0
    total_moves = 0

    for _ in range(games):
        record = play_game(attackers, defenders, move_limit=move_limit)
        total_moves += len(record.moves)
        if record.winner is Side.ATTACKERS:
            attacker_wins += 1
        elif record.winner is Side.DEFENDERS:
            defender_wins += 1
        else:
            unfinished += 1

    return MatchResult(
        games_played=games,
        attacker_wins=attacker_wins,
        defender_wins=defender_wins,
        unfinished=unfinished,
        average_length=total_moves / max(1, games),
    )
