import pytest
from hypothesis import given, strategies as st

from tictac.board import empty_snapshot, with_mark
from tictac.game import Game, Player, move_label


def play_cells(game, cells):
    for cell in cells:
        assert game.click(cell)


def test_new_game_starts_with_single_empty_snapshot():
    game = Game.new()
    assert game.history == [empty_snapshot()]
    assert game.current_move == 0
    assert game.next_player is Player.X
    assert game.winner is None


def test_player_marks():
    assert Player.X.mark == "X"
    assert Player.O.mark == "O"


def test_first_move_in_centre():
    game = Game.new()
    assert game.click(4)
    assert game.current_squares[4] == "X"
    assert game.winner is None
    assert game.board().status() == "Next player: O"


def test_top_row_win_blocks_further_moves():
    game = Game.new()
    play_cells(game, [0, 3, 1, 4, 2])
    assert game.winner == "X"
    assert game.board().status() == "Winner: X"
    length = len(game.history)
    for cell in (5, 6, 7, 8):
        assert game.click(cell) is False
    assert len(game.history) == length


def test_branching_discards_future_moves():
    game = Game.new()
    play_cells(game, [0, 4, 8])
    discarded = game.history[3]
    game.jump_to(1)
    assert game.click(2)
    assert len(game.history) == 3
    assert game.current_move == 2
    assert discarded not in game.history
    assert game.history[2] == with_mark(game.history[1], 2, "O")


def test_jump_to_start_keeps_history():
    game = Game.new()
    play_cells(game, [0, 4, 8])
    game.jump_to(0)
    assert game.current_squares == empty_snapshot()
    assert len(game.history) == 4
    assert game.move_labels() == [
        "Go to game start",
        "Go to move #1",
        "Go to move #2",
        "Go to move #3",
    ]


def test_jump_to_current_move_is_harmless():
    game = Game.new()
    play_cells(game, [0, 4])
    history = list(game.history)
    game.jump_to(2)
    assert game.current_move == 2
    assert game.history == history


@pytest.mark.parametrize("move", [-1, 4])
def test_jump_outside_history_raises(move):
    game = Game.new()
    play_cells(game, [0, 4, 8])
    with pytest.raises(ValueError):
        game.jump_to(move)
    assert game.current_move == 3


def test_play_rejects_malformed_snapshot():
    game = Game.new()
    with pytest.raises(ValueError):
        game.play(["X"] * 3)
    assert game.history == [empty_snapshot()]


def test_play_stores_snapshot_as_tuple():
    game = Game.new()
    squares = ["X"] + [None] * 8
    game.play(squares)
    squares[0] = "O"
    assert game.history[1][0] == "X"


def test_earlier_snapshots_survive_later_moves():
    game = Game.new()
    play_cells(game, [0, 4])
    first = game.history[1]
    play_cells(game, [8])
    assert first == game.history[1]
    assert game.history[1] == with_mark(empty_snapshot(), 0, "X")


def test_turn_follows_displayed_move_not_history_length():
    game = Game.new()
    play_cells(game, [0, 4, 8])
    game.jump_to(2)
    assert game.next_mark == "X"
    game.jump_to(1)
    assert game.next_mark == "O"


def test_winner_is_derived_from_displayed_move():
    game = Game.new()
    play_cells(game, [0, 3, 1, 4, 2])
    game.jump_to(4)
    assert game.winner is None
    assert game.click(5)
    assert game.current_squares[5] == "X"
    assert game.winner is None
    assert len(game.history) == 6


def test_move_label():
    assert move_label(0) == "Go to game start"
    assert move_label(7) == "Go to move #7"


permutations = st.permutations(list(range(9)))


@given(permutations)
def test_sequential_replay_matches_direct_construction(order):
    game = Game.new()
    expected = [empty_snapshot()]
    x_next = True
    for cell in order:
        if game.winner:
            break
        expected.append(with_mark(expected[-1], cell, "X" if x_next else "O"))
        x_next = not x_next
        assert game.click(cell)
    assert game.history == expected
    assert len(game.history) == game.current_move + 1


@given(permutations, st.data())
def test_jump_then_commit_truncates(order, data):
    game = Game.new()
    for cell in order:
        if not game.click(cell):
            break
    k = data.draw(st.integers(min_value=0, max_value=len(game.history) - 1))
    game.jump_to(k)
    free = [i for i, cell in enumerate(game.current_squares) if cell is None]
    if game.winner or not free:
        return
    snapshot = with_mark(game.current_squares, free[0], game.next_mark)
    game.play(snapshot)
    assert len(game.history) == k + 2
    assert game.history[k + 1] == snapshot


@given(permutations, st.data())
def test_turn_alternates_with_index_parity(order, data):
    game = Game.new()
    for cell in order:
        if not game.click(cell):
            break
    move = data.draw(st.integers(min_value=0, max_value=len(game.history) - 1))
    game.jump_to(move)
    assert (game.next_mark == "X") == (move % 2 == 0)
