import pytest

from tictactoe.game import EMPTY, O, X, InvalidInputError, Status
from tictactoe.match import CPU, PVP, Match, MatchConfig
from tictactoe.minimax import OPTIMAL, RANDOM


def play_all(match, cells):
    for cell in cells:
        assert match.play(cell)


def test_pvp_round_and_scores():
    match = Match()
    play_all(match, [0, 3, 1, 4, 2])
    assert match.game_over
    assert match.outcome.status is Status.WIN
    assert match.scores == {X: 1, O: 0}
    assert match.status_text() == "X Wins!"
    assert not match.play(5)


def test_turns_alternate():
    match = Match()
    assert match.current == X
    match.play(4)
    assert match.current == O
    assert match.status_text() == "Turn: O | Mode: PVP"


def test_ignored_clicks():
    match = Match()
    assert match.play(4)
    assert not match.play(4)
    assert not match.play(9)
    assert not match.play(-1)
    assert match.history == [4]


def test_draw_does_not_score():
    match = Match()
    play_all(match, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert match.outcome.status is Status.DRAW
    assert match.status_text() == "Draw!"
    assert match.scores == {X: 0, O: 0}


def test_reset_keeps_scores_new_match_clears():
    match = Match()
    play_all(match, [0, 3, 1, 4, 2])
    match.reset()
    assert match.board == [EMPTY] * 9
    assert match.current == X
    assert not match.game_over
    assert match.scores[X] == 1

    match.new_match()
    assert match.scores == {X: 0, O: 0}


def test_place_raises_on_bad_cell():
    match = Match()
    match.place(0)
    with pytest.raises(InvalidInputError):
        match.place(0)
    with pytest.raises(InvalidInputError):
        match.place(12)


def test_cpu_replies_to_center_with_corner():
    match = Match(MatchConfig(mode=CPU, player_mark=X, difficulty=OPTIMAL))
    assert not match.needs_cpu_move
    assert match.play(4)
    assert match.needs_cpu_move
    assert match.cpu_move() == 0
    assert match.board[0] == O
    assert match.current == X
    assert match.status_text() == "Turn: X | Mode: CPU | You are X"


def test_cpu_moves_first_when_human_is_o():
    match = Match(MatchConfig(mode=CPU, player_mark=O, difficulty=RANDOM, seed=3))
    assert match.needs_cpu_move
    assert not match.play(0)
    cell = match.cpu_move()
    assert match.board[cell] == X
    assert not match.needs_cpu_move
    with pytest.raises(InvalidInputError):
        match.cpu_move()


def test_cpu_blocks_human():
    match = Match(MatchConfig(mode=CPU, difficulty="impossible"))
    match.play(0)
    assert match.cpu_move() == 4
    match.play(1)
    assert match.cpu_move() == 2


def test_scripted_human_cannot_beat_optimal_cpu():
    match = Match(MatchConfig(mode=CPU, player_mark=X, difficulty=OPTIMAL))
    human = iter([4, 8, 2, 6, 1, 3, 5, 7, 0])
    while not match.game_over:
        if match.needs_cpu_move:
            match.cpu_move()
        else:
            match.play(next(c for c in human if match.board[c] == EMPTY))
    assert match.scores[X] == 0


def test_changing_mode_or_mark_starts_new_match():
    match = Match()
    play_all(match, [0, 3, 1, 4, 2])
    match.set_mode(CPU)
    assert match.scores == {X: 0, O: 0}
    assert match.board == [EMPTY] * 9

    match.play(4)
    match.set_player_mark(O)
    assert match.board == [EMPTY] * 9
    assert match.cpu_mark == X


def test_changing_difficulty_keeps_round():
    match = Match(MatchConfig(mode=CPU))
    match.play(4)
    match.set_difficulty("optimal")
    assert match.config.difficulty == OPTIMAL
    assert match.board[4] == X


def test_invalid_config_rejected():
    with pytest.raises(InvalidInputError):
        Match(MatchConfig(mode="online"))
    with pytest.raises(InvalidInputError):
        Match(MatchConfig(player_mark=0))
    with pytest.raises(InvalidInputError):
        Match(MatchConfig(difficulty="hard"))


def test_score_text():
    match = Match(MatchConfig(mode=PVP))
    play_all(match, [0, 3, 1, 4, 2])
    assert match.score_text() == "X: 1  O: 0"
