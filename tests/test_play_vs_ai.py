import json
from pathlib import Path

import pytest

from tablut.core import IllegalMoveError, Piece

from scripts.play_vs_ai import replay_logged_game


def create_sample_log(path: Path, moves) -> None:
    entries = [
        {"move_index": i, "actor": "human" if i % 2 else "ai", "side": "?", "move": move}
        for i, move in enumerate(moves)
    ]
    path.write_text(json.dumps({"metadata": {}, "moves": entries}))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path, ["a4-b4", "e7-d7"])
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 2
    assert summary["winner"] is None
    grid = summary["grid"]
    assert grid[3][1] == Piece.ATTACKER
    assert grid[6][3] == Piece.DEFENDER


def test_replay_detects_repetition(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path, ["a4-b4", "e7-d7", "b4-a4", "d7-e7"])
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["winner"] == "attackers"
    assert summary["repeated"]


def test_replay_rejects_illegal_log(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path, ["a4-a6"])
    with pytest.raises(IllegalMoveError):
        replay_logged_game(log_path, verbose=False)
