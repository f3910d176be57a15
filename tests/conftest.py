import pytest

from tictactoe.game import parse_board


@pytest.fixture
def board():
    """Build a board from rows like "XO.", ".X.", "..O"."""
    def _board(*rows):
        return parse_board("".join(rows))
    return _board
