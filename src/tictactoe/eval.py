"""
Evaluation functions.

Plays move selectors against each other and reports win/draw/loss rates.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import torch
from tqdm.auto import trange

from .game import EMPTY, O, X, is_terminal, empty_board
from .minimax import OPTIMAL, RANDOM, Selector, make_selector, normalize_difficulty


@dataclass
class EvalConfig:
    """Arena configuration."""

    # Number of games
    games: int = 20

    # Difficulty playing X (first game when alternating)
    x_difficulty: str = OPTIMAL

    # Difficulty playing O (first game when alternating)
    o_difficulty: str = RANDOM

    # Random seed
    seed: int = 0

    # Swap sides every game
    alternate: bool = True

    # Show a progress bar
    progress: bool = True


def set_seed(seed: int) -> torch.Generator:
    """Seed python and torch RNGs; return a generator seeded the same way."""
    random.seed(seed)
    torch.manual_seed(seed)
    generator = torch.Generator()
    generator.manual_seed(seed)
    return generator


def play_game(x_selector: Selector, o_selector: Selector) -> Tuple[int, int, List[int]]:
    """
    Play one game from an empty board.

    Returns:
        (winner, num_plies, moves) with winner +1/-1/0
    """
    board = empty_board()
    player = X
    moves: List[int] = []

    for ply in range(10):
        done, winner = is_terminal(board)
        if done:
            return winner, ply, moves

        selector = x_selector if player == X else o_selector
        action = selector(board, player)
        if board[action] != EMPTY:
            raise RuntimeError(f"{selector.__name__} played occupied cell {action}")

        board[action] = player
        moves.append(action)
        player = -player

    raise RuntimeError("game did not finish within 9 plies")


def eval_selectors(config: EvalConfig, generator: Optional[torch.Generator] = None) -> Dict[str, float]:
    """
    Pit two difficulties against each other.

    Returns:
        Dict with 'games', per-difficulty win rates under keys
        '<difficulty>_w' (named 'x_w'/'o_w' when both sides share a
        difficulty), 'draw', and mean game length 'plies'.
    """
    a = normalize_difficulty(config.x_difficulty)
    b = normalize_difficulty(config.o_difficulty)
    if generator is None:
        generator = set_seed(config.seed)

    sel_a = make_selector(a, generator)
    sel_b = make_selector(b, generator)
    same = a == b
    key_a = "x_w" if same else f"{a}_w"
    key_b = "o_w" if same else f"{b}_w"

    wins = {key_a: 0, key_b: 0}
    draws = 0
    total_plies = 0

    rng = trange(config.games, desc=f"{a} vs {b}", disable=not config.progress)
    for g in rng:
        # With identical difficulties the sides are what matters, so never swap
        swap = config.alternate and not same and g % 2 == 1
        if swap:
            winner, plies, _ = play_game(sel_b, sel_a)
            side_of = {X: key_b, O: key_a}
        else:
            winner, plies, _ = play_game(sel_a, sel_b)
            side_of = {X: key_a, O: key_b}

        total_plies += plies
        if winner == 0:
            draws += 1
        else:
            wins[side_of[winner]] += 1

    total = max(config.games, 1)
    results = {"games": config.games, "draw": draws / total, "plies": total_plies / total}
    for key, n in wins.items():
        results[key] = n / total
    return results
