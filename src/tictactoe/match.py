"""
Match orchestration: turns, rounds, score tallies and the vs-CPU hook.

A match is a sequence of rounds. Scores survive `reset()` (new round) and are
cleared by `new_match()`.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import torch

from .game import (
    EMPTY,
    MARKS,
    O,
    SYMBOLS,
    X,
    InvalidInputError,
    Outcome,
    Status,
    apply_move,
    empty_board,
    evaluate,
    opponent,
)
from .minimax import RANDOM, normalize_difficulty, select_move

PVP = "pvp"
CPU = "cpu"
MODES = (PVP, CPU)


@dataclass
class MatchConfig:
    """Match configuration."""

    # "pvp" or "cpu"
    mode: str = PVP

    # Human's mark (only used vs CPU)
    player_mark: int = X

    # Computer difficulty: "random" or "optimal"
    difficulty: str = RANDOM

    # Pause before the computer replies, seconds (applied by the front end)
    cpu_delay: float = 0.3

    # Seed for the random difficulty
    seed: Optional[int] = None


@dataclass
class Match:
    """Mutable match state owned by a front end."""

    config: MatchConfig = field(default_factory=MatchConfig)
    board: List[int] = field(default_factory=empty_board)
    current: int = X
    game_over: bool = False
    scores: Dict[int, int] = field(default_factory=lambda: {X: 0, O: 0})
    history: List[int] = field(default_factory=list)

    def __post_init__(self):
        if self.config.mode not in MODES:
            raise InvalidInputError(f"unknown mode {self.config.mode!r}")
        if self.config.player_mark not in MARKS:
            raise InvalidInputError(f"unknown mark {self.config.player_mark!r}")
        self.config.difficulty = normalize_difficulty(self.config.difficulty)
        self.generator = torch.Generator()
        if self.config.seed is not None:
            self.generator.manual_seed(self.config.seed)

    @property
    def cpu_mark(self) -> int:
        return opponent(self.config.player_mark)

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def needs_cpu_move(self) -> bool:
        return (
            self.config.mode == CPU
            and not self.game_over
            and self.current == self.cpu_mark
        )

    def reset(self) -> None:
        """Start a new round; scores are kept."""
        self.board = empty_board()
        self.current = X
        self.game_over = False
        self.history = []

    def new_match(self) -> None:
        """Start over with cleared scores."""
        self.reset()
        self.scores = {X: 0, O: 0}

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise InvalidInputError(f"unknown mode {mode!r}")
        self.config.mode = mode
        self.new_match()

    def set_player_mark(self, mark: int) -> None:
        if mark not in MARKS:
            raise InvalidInputError(f"unknown mark {mark!r}")
        self.config.player_mark = mark
        self.new_match()

    def set_difficulty(self, difficulty: str) -> None:
        # Takes effect on the next computer move, the round goes on
        self.config.difficulty = normalize_difficulty(difficulty)

    def place(self, cell: int) -> Outcome:
        """
        Place the current mark on cell and advance the turn.

        Raises:
            InvalidInputError: cell out of range or taken, or round finished
        """
        if self.game_over:
            raise InvalidInputError("round is over")
        self.board = apply_move(self.board, self.current, cell)
        self.history.append(cell)

        outcome = self.outcome
        if outcome.is_over:
            self.game_over = True
            if outcome.status is Status.WIN:
                self.scores[outcome.winner] += 1
        else:
            self.current = opponent(self.current)
        return outcome

    def play(self, cell: int) -> bool:
        """
        Human click on cell. Returns False when the click is ignored.

        Clicks are ignored on taken or out-of-range cells, after the round is
        over, and in cpu mode while it is the computer's turn.
        """
        if self.game_over:
            return False
        if not isinstance(cell, int) or not 0 <= cell < 9 or self.board[cell] != EMPTY:
            return False
        if self.config.mode == CPU and self.current != self.config.player_mark:
            return False
        self.place(cell)
        return True

    def cpu_move(self) -> int:
        """Let the computer play for its mark. Returns the chosen cell."""
        if not self.needs_cpu_move:
            raise InvalidInputError("it is not the computer's turn")
        cell = select_move(self.board, self.current, self.config.difficulty, self.generator)
        self.place(cell)
        return cell

    def status_text(self) -> str:
        if self.game_over:
            return str(self.outcome)
        text = f"Turn: {SYMBOLS[self.current]} | Mode: {self.config.mode.upper()}"
        if self.config.mode == CPU:
            text += f" | You are {SYMBOLS[self.config.player_mark]}"
        return text

    def score_text(self) -> str:
        return f"X: {self.scores[X]}  O: {self.scores[O]}"
