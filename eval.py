#!/usr/bin/env python3
"""
Pit the computer difficulties against each other.

Usage:
    python eval.py                              # optimal vs random, 20 games
    python eval.py --x optimal --o optimal --games 2
    python eval.py --games 100 --no-alternate
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import EvalConfig, InvalidInputError, eval_selectors, set_seed
from tictactoe.minimax import DIFFICULTIES


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe computer players")
    parser.add_argument("--games", type=int, default=20, help="Number of games")
    parser.add_argument("--x", type=str, default="optimal", choices=DIFFICULTIES, help="Difficulty playing X")
    parser.add_argument("--o", type=str, default="random", choices=DIFFICULTIES, help="Difficulty playing O")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--no-alternate", action="store_true", help="Keep sides fixed across games")

    args = parser.parse_args()

    config = EvalConfig(
        games=args.games,
        x_difficulty=args.x,
        o_difficulty=args.o,
        seed=args.seed,
        alternate=not args.no_alternate,
    )

    print("\n=== Evaluation ===")
    print(f"{config.x_difficulty} vs {config.o_difficulty} ({config.games} games, seed {config.seed})")

    generator = set_seed(config.seed)
    try:
        results = eval_selectors(config, generator)
    except InvalidInputError as e:
        print(f"Evaluation failed: {e}")
        return

    for key, value in results.items():
        if key.endswith("_w"):
            print(f"  {key[:-2] + ' wins:':<16}{value:.2%}")
    print(f"  {'Draws:':<16}{results['draw']:.2%}")
    print(f"  {'Mean plies:':<16}{results['plies']:.2f}")


if __name__ == "__main__":
    main()
