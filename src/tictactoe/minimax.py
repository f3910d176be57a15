"""
Move selection for the computer player.

Two difficulties:
  - random:  uniform choice over empty cells
  - optimal: immediate win, then immediate block, then full-depth minimax
             over root moves in center/corner/edge preference order
"""

from typing import Callable, Dict, List, Optional, Sequence

import torch

from .game import (
    EMPTY,
    MARKS,
    InvalidInputError,
    Status,
    evaluate,
    legal_moves,
    opponent,
    validate_board,
)

RANDOM = "random"
OPTIMAL = "optimal"
DIFFICULTIES = (RANDOM, OPTIMAL)

# Older UI labels
DIFFICULTY_ALIASES = {
    "easy": RANDOM,
    "impossible": OPTIMAL,
}

# Root candidates: center, corners, edges. First best score in this order wins.
ROOT_PREFERENCE = (4, 0, 2, 6, 8, 1, 3, 5, 7)

WIN_SCORE = 10


def normalize_difficulty(difficulty: str) -> str:
    """Map a difficulty name or alias onto RANDOM/OPTIMAL."""
    key = str(difficulty).strip().lower()
    key = DIFFICULTY_ALIASES.get(key, key)
    if key not in DIFFICULTIES:
        raise InvalidInputError(f"unknown difficulty {difficulty!r}")
    return key


def legal_move_mask(board: Sequence[int]) -> torch.BoolTensor:
    """Return [9] boolean mask of legal moves."""
    mask = torch.zeros(9, dtype=torch.bool)
    for i, v in enumerate(board):
        if v == EMPTY:
            mask[i] = True
    return mask


def _check_position(board: Sequence[int], mark: int) -> None:
    validate_board(board)
    if mark not in MARKS:
        raise InvalidInputError(f"unknown mark {mark!r}")
    outcome = evaluate(board)
    if outcome.is_over:
        raise InvalidInputError(f"no move to select: position is already {outcome.status.value}")


def random_move(
    board: Sequence[int],
    generator: Optional[torch.Generator] = None,
) -> int:
    """Pick an empty cell uniformly at random."""
    mask = legal_move_mask(board)
    if not mask.any():
        raise InvalidInputError("no empty cell left")
    action = torch.multinomial(mask.float(), 1, generator=generator)
    return int(action.item())


def find_winning_move(board: List[int], mark: int) -> Optional[int]:
    """Return the lowest empty cell that completes a line for mark, if any."""
    for i in legal_moves(board):
        board[i] = mark
        outcome = evaluate(board)
        board[i] = EMPTY
        if outcome.status is Status.WIN and outcome.winner == mark:
            return i
    return None


def minimax_score(board: List[int], mark: int, maximizing: bool, depth: int) -> int:
    """
    Exhaustive minimax value of board from mark's point of view.

    Args:
        board: Scratch board, mutated and restored in place
        mark: The player the score is computed for
        maximizing: True when it is mark's turn
        depth: Plies played since the candidate root move

    Returns:
        10 - depth for a mark win, depth - 10 for a loss, 0 for a draw
    """
    outcome = evaluate(board)
    if outcome.status is Status.WIN:
        if outcome.winner == mark:
            return WIN_SCORE - depth
        return depth - WIN_SCORE
    if outcome.status is Status.DRAW:
        return 0

    to_play = mark if maximizing else opponent(mark)
    best = None
    for i in legal_moves(board):
        board[i] = to_play
        score = minimax_score(board, mark, not maximizing, depth + 1)
        board[i] = EMPTY
        if best is None or (score > best if maximizing else score < best):
            best = score
    return best


def root_scores(board: Sequence[int], mark: int) -> Dict[int, int]:
    """
    Minimax score of every empty cell, keyed in ROOT_PREFERENCE order.

    The candidate placement itself is depth 0.
    """
    scratch = list(board)
    scores: Dict[int, int] = {}
    for i in ROOT_PREFERENCE:
        if scratch[i] != EMPTY:
            continue
        scratch[i] = mark
        scores[i] = minimax_score(scratch, mark, False, 0)
        scratch[i] = EMPTY
    return scores


def optimal_move(board: Sequence[int], mark: int) -> int:
    """Win if possible, else block, else the best minimax move."""
    scratch = list(board)

    win = find_winning_move(scratch, mark)
    if win is not None:
        return win

    block = find_winning_move(scratch, opponent(mark))
    if block is not None:
        return block

    best_score = None
    best_move = None
    for i, score in root_scores(scratch, mark).items():
        if best_score is None or score > best_score:
            best_score = score
            best_move = i
    return best_move


def select_move(
    board: Sequence[int],
    mark: int,
    difficulty: str = OPTIMAL,
    generator: Optional[torch.Generator] = None,
) -> int:
    """
    Choose the computer's move.

    Args:
        board: 9-cell snapshot, never mutated
        mark: Mark to move (+1 or -1)
        difficulty: "random" or "optimal" (or the aliases "easy"/"impossible")
        generator: Optional torch.Generator used by the random difficulty

    Returns:
        Cell index in [0, 8]

    Raises:
        InvalidInputError: board malformed, full or already decided
    """
    difficulty = normalize_difficulty(difficulty)
    _check_position(board, mark)
    if difficulty == RANDOM:
        return random_move(board, generator)
    return optimal_move(board, mark)


Selector = Callable[[Sequence[int], int], int]


def make_selector(difficulty: str, generator: Optional[torch.Generator] = None) -> Selector:
    """Bind a difficulty (and generator) into a (board, mark) -> cell callable."""
    difficulty = normalize_difficulty(difficulty)

    def selector(board: Sequence[int], mark: int) -> int:
        return select_move(board, mark, difficulty, generator)

    selector.__name__ = f"{difficulty}_selector"
    return selector
