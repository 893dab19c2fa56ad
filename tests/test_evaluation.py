import numpy as np

from tablut.core import Board, Piece, Side, sq
from tablut.evaluation import RandomPlayer, SearchPlayer, evaluate_players, play_game
from tablut.search import SearchConfig


def test_evaluate_random_vs_random_small():
    player_a = RandomPlayer(np.random.default_rng(0))
    player_b = RandomPlayer(np.random.default_rng(1))
    result = evaluate_players(player_a, player_b, games=2, move_limit=10)
    assert result.games_played == 2
    assert result.attacker_wins + result.defender_wins + result.unfinished == 2
    assert 0 < result.average_length <= 20


def test_search_player_finishes_a_won_position():
    board = Board()
    board.clear(Side.DEFENDERS)
    board.put(Piece.KING, sq(2, 2))
    board.put(Piece.ATTACKER, sq(6, 6))

    record = play_game(
        RandomPlayer(np.random.default_rng(0)),
        SearchPlayer(SearchConfig(depth=1)),
        board=board,
    )

    assert record.winner is Side.DEFENDERS
    assert len(record.moves) == 1
    assert record.notation() == ["c3-c9"]
