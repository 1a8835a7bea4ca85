import dataclasses

import pytest

from src.core.state import GameState


def test_defaults_describe_a_fresh_game():
    state = GameState()
    assert state.scrambled_word == ""
    assert state.round_count == 1
    assert state.score == 0
    assert state.guess_was_wrong is False
    assert state.is_game_over is False


def test_state_is_frozen():
    state = GameState(scrambled_word="tac")
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.score = 5


def test_value_semantics():
    assert GameState(scrambled_word="tac", score=10) == GameState(scrambled_word="tac", score=10)
    assert dataclasses.replace(GameState(), guess_was_wrong=True) != GameState()


@pytest.mark.parametrize("kwargs", [{"round_count": 0}, {"score": -1}])
def test_rejects_out_of_range_fields(kwargs):
    with pytest.raises(ValueError):
        GameState(**kwargs)
