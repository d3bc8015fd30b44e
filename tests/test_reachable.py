import pytest

from ttt_engine.game import legal_moves, play, start
from ttt_engine.reachable import reachable_states, terminal_counts


@pytest.fixture(scope="module")
def states():
    return reachable_states()


def test_reachable_counts_snapshot(states):
    assert len(states) == 5478
    assert terminal_counts(states) == {"x": 626, "o": 316, "draw": 16}
    assert sum(1 for s in states.values() if s.is_over) == 958


def test_every_reachable_state_is_consistent(states):
    for board, s in states.items():
        assert s.board == board
        x, o = board.count("X"), board.count("O")
        assert x == o or x == o + 1
        assert s.is_over == (s.winner is not None or not s.available_positions)
        assert s.is_draw == (s.is_over and s.winner is None)
        if not s.is_over:
            # the side to move follows from the counts
            assert s.current_player == ("X" if x == o else "O")
        elif s.winner is not None:
            assert s.current_player == s.winner


def test_terminal_states_absorb_every_position(states):
    for s in states.values():
        if s.is_over:
            assert legal_moves(s) == ()
            for p in range(1, 10):
                assert play(s, p) == s


def test_start_is_included(states):
    assert states[start().board] == start()
