"""
TicTacToe game rules and outcome evaluation.

Board representation: list[int] of length 9, row-major
  - 0: empty
  - +1: X
  - -1: O

Mark: +1 (X) or -1 (O). X always moves first.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

EMPTY = 0
X = +1
O = -1

MARKS = (X, O)
SYMBOLS = {EMPTY: " ", X: "X", O: "O"}

# Winning lines, in evaluation order
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]


class InvalidInputError(ValueError):
    """Raised when a caller hands in a board, mark or move that breaks the rules."""


class Status(Enum):
    IN_PROGRESS = "in-progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Game status derived from a board."""
    status: Status
    winner: int = EMPTY  # winning mark when status is WIN

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def win(cls, mark: int) -> "Outcome":
        return cls(Status.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WIN:
            return f"{SYMBOLS[self.winner]} Wins!"
        if self.status is Status.DRAW:
            return "Draw!"
        return "In progress"


def winning_line(board: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    """Return the first completed line (rows, then columns, then diagonals)."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Sequence[int]) -> Outcome:
    """
    Evaluate a board.

    Returns:
        Outcome.win(mark) for the first completed line, Outcome.draw() for a
        full board with no line, Outcome.in_progress() otherwise.
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.win(board[line[0]])
    if all(v != EMPTY for v in board):
        return Outcome.draw()
    return Outcome.in_progress()


def is_terminal(board: Sequence[int]) -> Tuple[bool, int]:
    """
    Check if board is terminal.

    Returns:
        (is_terminal, winner) where winner is +1/-1/0
    """
    outcome = evaluate(board)
    return outcome.is_over, outcome.winner


def opponent(mark: int) -> int:
    return -mark


def empty_board() -> List[int]:
    return [EMPTY] * 9


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of empty cell indices in ascending order."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: Sequence[int], mark: int, cell: int) -> List[int]:
    """Apply move and return new board. The input board is left untouched."""
    if not isinstance(cell, int) or not 0 <= cell < 9:
        raise InvalidInputError(f"cell {cell!r} is outside [0, 8]")
    if mark not in MARKS:
        raise InvalidInputError(f"unknown mark {mark!r}")
    if board[cell] != EMPTY:
        raise InvalidInputError(f"cell {cell} is already taken")
    if evaluate(board).is_over:
        raise InvalidInputError("game is already over")
    new_board = list(board)
    new_board[cell] = mark
    return new_board


def side_to_move(board: Sequence[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    return X if x_cnt == o_cnt else O


def validate_board(board: Sequence[int]) -> None:
    """Raise InvalidInputError unless board is 9 cells of EMPTY/X/O."""
    if len(board) != 9:
        raise InvalidInputError(f"board must have 9 cells, got {len(board)}")
    for i, v in enumerate(board):
        if v not in (EMPTY, X, O):
            raise InvalidInputError(f"cell {i} holds {v!r}")


def is_legal_board(board: Sequence[int]) -> bool:
    """Check if board could arise from alternating play with X first."""
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)

    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        return False

    # Can't have both winners
    winners = {board[a] for a, b, c in WIN_LINES
               if board[a] != EMPTY and board[a] == board[b] == board[c]}
    return len(winners) < 2


def parse_board(text: str) -> List[int]:
    """
    Build a board from 9 characters of 'X', 'O' and '.' (or '-', '_') for empty.

    Anything else is ignored, so "XO. .X. ..O" and "XO./.X./..O" both work.
    """
    cells = [ch for ch in text.upper() if ch in "XO.-_"]
    board = []
    for ch in cells:
        if ch == "X":
            board.append(X)
        elif ch == "O":
            board.append(O)
        else:
            board.append(EMPTY)
    validate_board(board)
    return board


def render_board(board: Sequence[int], hints: bool = False) -> str:
    """Render board as a 3x3 text grid; empty cells show their index if hints."""
    rows = []
    for r in range(3):
        cells = []
        for c in range(3):
            i = r * 3 + c
            v = board[i]
            cells.append(str(i) if (hints and v == EMPTY) else SYMBOLS[v])
        rows.append(" " + " | ".join(cells) + " ")
    return "\n---+---+---\n".join(rows)
