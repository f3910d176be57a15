import pytest
import torch

from tictactoe.eval import EvalConfig, eval_selectors, play_game, set_seed
from tictactoe.game import EMPTY, O, X, evaluate
from tictactoe.minimax import OPTIMAL, RANDOM, make_selector


def first_free(board, mark):
    return board.index(EMPTY)


def test_play_game_reports_winner_and_moves():
    # X takes 0, 2, 4, 6 and wins on the anti-diagonal
    winner, plies, moves = play_game(first_free, first_free)
    assert winner == X
    assert moves == [0, 1, 2, 3, 4, 5, 6]
    assert plies == 7


def test_play_game_rejects_occupied_cell():
    def stubborn(board, mark):
        return 4

    with pytest.raises(RuntimeError):
        play_game(stubborn, stubborn)


def test_optimal_as_o_never_loses_to_random():
    g = torch.Generator().manual_seed(0)
    config = EvalConfig(games=12, x_difficulty=RANDOM, o_difficulty=OPTIMAL, alternate=False, progress=False)
    results = eval_selectors(config, g)
    assert results["games"] == 12
    assert results["random_w"] == 0.0
    assert results["optimal_w"] + results["draw"] == pytest.approx(1.0)


def test_random_vs_random_rates_sum_to_one():
    config = EvalConfig(games=50, x_difficulty=RANDOM, o_difficulty=RANDOM, seed=5, progress=False)
    results = eval_selectors(config)
    assert results["x_w"] + results["o_w"] + results["draw"] == pytest.approx(1.0)
    assert 5 <= results["plies"] <= 9


def test_optimal_self_play_game_is_a_draw():
    opt = make_selector(OPTIMAL)
    winner, plies, moves = play_game(opt, opt)
    assert winner == 0
    assert plies == 9
    assert moves[0] == 4


def test_set_seed_is_reproducible():
    config = EvalConfig(games=30, x_difficulty=RANDOM, o_difficulty=RANDOM, progress=False)
    a = eval_selectors(config, set_seed(11))
    b = eval_selectors(config, set_seed(11))
    assert a == b


def test_final_board_of_random_game_is_terminal():
    sel = make_selector(RANDOM, torch.Generator().manual_seed(2))
    winner, plies, moves = play_game(sel, sel)
    board = [EMPTY] * 9
    mark = X
    for cell in moves:
        board[cell] = mark
        mark = O if mark == X else X
    assert evaluate(board).is_over
    assert evaluate(board).winner == winner
