#!/usr/bin/env python3
"""Pit the minimax AI against a random baseline."""

import argparse
import json
import logging

import numpy as np

from tablut.config import build_search_config, load_yaml_config
from tablut.evaluation import RandomPlayer, SearchPlayer, evaluate_players


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/search.yaml")
    parser.add_argument("--games", type=int, default=4)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--heuristic", choices=["flat", "material"])
    parser.add_argument("--ai-side", choices=["attackers", "defenders"], default="defenders")
    parser.add_argument("--move-limit", type=int)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    cfg = load_yaml_config(args.config)
    search_config = build_search_config(cfg, depth=args.depth, heuristic=args.heuristic)
    move_limit = args.move_limit if args.move_limit is not None else cfg.get("move_limit", 100)

    ai = SearchPlayer(search_config)
    baseline = RandomPlayer(np.random.default_rng(args.seed))
    if args.ai_side == "defenders":
        result = evaluate_players(baseline, ai, games=args.games, move_limit=move_limit)
    else:
        result = evaluate_players(ai, baseline, games=args.games, move_limit=move_limit)

    output = {
        "games": result.games_played,
        "ai_side": args.ai_side,
        "attacker_wins": result.attacker_wins,
        "defender_wins": result.defender_wins,
        "unfinished": result.unfinished,
        "average_length": result.average_length,
        "attacker_winrate": result.winrate_attackers(),
        "defender_winrate": result.winrate_defenders(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
