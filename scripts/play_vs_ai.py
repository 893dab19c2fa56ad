#!/usr/bin/env python3
"""Play Tablut against the minimax AI in the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from tablut import Board, IllegalMoveError, Move, SearchPlayer, Side
from tablut.config import build_search_config, load_yaml_config


def prompt_human_move(board: Board) -> Move:
    while True:
        raw = input(f"{board.turn.value} move (e.g. e3-e1, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Game abandoned.")
            sys.exit(0)
        try:
            move = Move.parse(raw)
        except ValueError as exc:
            print(exc)
            continue
        if board.is_legal_move(move):
            return move
        print(f"{move} is not legal here.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log written to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    board = Board()
    if verbose:
        print(board)
    for entry in moves:
        move = Move.parse(entry["move"])
        if not board.is_legal_move(move):
            raise IllegalMoveError(move, f"logged as move {entry.get('move_index')}")
        board.apply_move(move)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({entry.get('side', '?')}): {move}")
            print(board)
    winner = board.outcome()
    summary = {
        "winner": winner.value if winner else None,
        "moves": len(moves),
        "repeated": board.repeated,
        "grid": board.grid.tolist(),
    }
    if verbose:
        print(f"Result: {summary['winner'] or 'unfinished'}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    cfg = load_yaml_config(args.config)
    search_config = build_search_config(cfg, depth=args.depth, heuristic=args.heuristic)
    move_limit = args.move_limit if args.move_limit is not None else cfg.get("move_limit")

    ai = SearchPlayer(search_config)
    human_side = Side(args.human_side)
    board = Board()
    if move_limit is not None:
        board.set_move_limit(int(move_limit))

    log_records: List[Dict] = []
    while board.outcome() is None and not board.limit_reached():
        print()
        print(board)
        if board.turn is human_side:
            move = prompt_human_move(board)
            actor = "human"
        else:
            move = ai.choose(board)
            actor = "ai"
            print(f"AI ({board.turn.value}) plays {move}")
        log_records.append(
            {
                "move_index": board.move_count,
                "actor": actor,
                "side": board.turn.value,
                "move": str(move),
            }
        )
        board.apply_move(move)

    print()
    print(board)
    winner = board.outcome()
    if winner is None:
        print("Move limit reached.")
    else:
        suffix = " by repetition" if board.repeated else ""
        print(f"{winner.value.capitalize()} win{suffix}.")

    if args.log_file:
        metadata = {
            "human_side": human_side.value,
            "depth": search_config.depth,
            "heuristic": search_config.heuristic,
            "move_limit": move_limit,
            "winner": winner.value if winner else None,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Tablut in the console against the AI.")
    parser.add_argument("--config", type=str, default="configs/search.yaml")
    parser.add_argument("--human-side", choices=[side.value for side in Side], default="defenders")
    parser.add_argument("--depth", type=int)
    parser.add_argument("--heuristic", choices=["flat", "material"])
    parser.add_argument("--move-limit", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
