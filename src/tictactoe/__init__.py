"""
TicTacToe - outcome evaluation and a computer opponent.

The computer plays either a uniformly random legal move or the optimal move
(immediate win, immediate block, then exhaustive minimax).
"""

from .game import (
    EMPTY,
    X,
    O,
    WIN_LINES,
    InvalidInputError,
    Outcome,
    Status,
    evaluate,
    winning_line,
    is_terminal,
    legal_moves,
    apply_move,
    side_to_move,
    opponent,
    parse_board,
    render_board,
)
from .minimax import (
    RANDOM,
    OPTIMAL,
    ROOT_PREFERENCE,
    select_move,
    random_move,
    optimal_move,
    root_scores,
    make_selector,
)
from .match import Match, MatchConfig
from .eval import EvalConfig, eval_selectors, play_game, set_seed

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "WIN_LINES",
    "InvalidInputError",
    "Outcome",
    "Status",
    "evaluate",
    "winning_line",
    "is_terminal",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "opponent",
    "parse_board",
    "render_board",
    "RANDOM",
    "OPTIMAL",
    "ROOT_PREFERENCE",
    "select_move",
    "random_move",
    "optimal_move",
    "root_scores",
    "make_selector",
    "Match",
    "MatchConfig",
    "EvalConfig",
    "eval_selectors",
    "play_game",
    "set_seed",
]
