#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py                                   # human vs human
    python play.py --mode cpu --difficulty optimal   # you play X vs the computer
    python play.py --mode cpu --mark O --seed 1
"""

import sys
import time
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import Match, MatchConfig, InvalidInputError, X, O, render_board
from tictactoe.match import CPU, MODES

MARK_BY_NAME = {"X": X, "O": O}


def print_board(match: Match):
    """Pretty print board with free cell indices."""
    print(render_board(match.board, hints=True))


def play_round(match: Match) -> bool:
    """
    Play one round. Returns False when the player quits.

    Commands at the move prompt: 0-8 to place, 'r' reset round, 'n' new match,
    'q' quit.
    """
    while not match.game_over:
        print()
        print(match.status_text())
        print_board(match)

        if match.needs_cpu_move:
            time.sleep(match.config.cpu_delay)
            cell = match.cpu_move()
            print(f"\nComputer plays: {cell}")
            continue

        try:
            raw = input("Your move (0-8, r=reset, n=new match, q=quit): ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted")
            return False

        if raw == "q":
            return False
        if raw == "r":
            match.reset()
            continue
        if raw == "n":
            match.new_match()
            continue

        try:
            cell = int(raw)
        except ValueError:
            print("Please type a number 0..8.")
            continue
        if not match.play(cell):
            print("Invalid move, try again")

    print()
    print_board(match)
    print(f"\n{match.status_text()}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe")
    parser.add_argument("--mode", choices=MODES, default="pvp", help="Human vs human or vs computer")
    parser.add_argument("--mark", choices=["X", "O"], default="X", help="Your mark vs the computer")
    parser.add_argument("--difficulty", type=str, default="random", help="random/optimal (or easy/impossible)")
    parser.add_argument("--delay", type=float, default=0.3, help="Pause before the computer moves (s)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    config = MatchConfig(
        mode=args.mode,
        player_mark=MARK_BY_NAME[args.mark],
        difficulty=args.difficulty,
        cpu_delay=args.delay,
        seed=args.seed,
    )
    try:
        match = Match(config)
    except InvalidInputError as e:
        print(f"Invalid options: {e}")
        return

    print("\n=== TicTacToe ===")
    if config.mode == CPU:
        print(f"You are {args.mark} | Difficulty: {config.difficulty}")
    print("Cells:")
    print(" 0 | 1 | 2 ")
    print("---+---+---")
    print(" 3 | 4 | 5 ")
    print("---+---+---")
    print(" 6 | 7 | 8 ")

    while play_round(match):
        print(f"Score  {match.score_text()}")
        try:
            again = input("Play again? [Y/n] ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            break
        if again.startswith("n"):
            break
        match.reset()

    print(f"\nFinal score  {match.score_text()}")


if __name__ == "__main__":
    main()
