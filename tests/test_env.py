"""Unit tests for fourinarow/game/env.py"""

from typing import List

import numpy as np
import pytest

from fourinarow.game.env import FourInARowEnv
from fourinarow.utils import BoardDimensions, BoardToken, PlayerColor


@pytest.fixture
def env() -> FourInARowEnv:
    env = FourInARowEnv(render_mode="ascii")
    env.reset(seed=0)
    return env


def test_spaces_follow_dimensions() -> None:
    env = FourInARowEnv(dimensions=BoardDimensions(rows=5, columns=8))
    assert env.action_space.n == 8
    assert env.observation_space.shape == (5, 8)

    observation, _ = env.reset()
    assert env.observation_space.contains(observation)


def test_reset_returns_empty_board(env: FourInARowEnv) -> None:
    observation, info = env.reset()

    assert observation.dtype == np.int8
    assert np.all(observation == BoardToken.NONE.value)
    assert info['valid_moves'] == list(range(7))
    assert info['current_player'] == 'yellow'
    assert info['game_status'] == 'start'
    assert info['moves_made'] == 0
    assert info['move_status'] is None


def test_reset_with_options_resumes_game(env: FourInARowEnv) -> None:
    env.step(3)
    history = env.engine.history

    _, info = env.reset(options={'starting_color': 'yellow', 'history': history})
    assert info['moves_made'] == 1
    assert info['current_player'] == PlayerColor.RED.value


def test_step_places_token(env: FourInARowEnv) -> None:
    observation, reward, terminated, truncated, info = env.step(3)

    assert observation[5, 3] == BoardToken.YELLOW.value
    assert reward == env.reward_step
    assert not terminated
    assert not truncated
    assert info['move_status'] == 'success'
    assert info['current_player'] == 'red'


def test_invalid_action_truncates_without_changing_state(env: FourInARowEnv) -> None:
    for _ in range(6):
        env.step(0)

    observation, reward, terminated, truncated, info = env.step(0)
    assert reward == env.reward_invalid_move
    assert not terminated
    assert truncated
    assert info['invalid_move'] is True
    assert info['message'] == "Selected column is filled"
    assert info['moves_made'] == 6


def test_winning_step_terminates(env: FourInARowEnv) -> None:
    for column in [0, 6, 1, 6, 2, 6]:
        env.step(column)

    _, reward, terminated, truncated, info = env.step(3)
    assert reward == env.reward_win
    assert terminated
    assert not truncated
    assert info['game_status'] == 'win'
    assert info['winning_line'] == [(5, 3), (5, 2), (5, 1), (5, 0)]
    assert info['valid_moves'] == []


def test_draw_step_terminates(env: FourInARowEnv, draw_sequence: List[int]) -> None:
    for column in draw_sequence[:-1]:
        env.step(column)

    _, reward, terminated, _, info = env.step(draw_sequence[-1])
    assert reward == env.reward_draw
    assert terminated
    assert info['game_status'] == 'draw'


def test_render_modes(env: FourInARowEnv, capsys: pytest.CaptureFixture) -> None:
    env.step(2)
    assert "Y" in env.render()

    human = FourInARowEnv(render_mode="human")
    human.reset()
    human.step(2)
    assert "Y" in capsys.readouterr().out

    assert FourInARowEnv().render() is None


@pytest.mark.parametrize("action", ["left", None, 2.5])
def test_non_numeric_action_is_an_invalid_move(env: FourInARowEnv, action) -> None:
    observation, reward, terminated, truncated, info = env.step(action)

    assert reward == env.reward_invalid_move
    assert not terminated
    assert truncated
    assert info['invalid_move'] is True
    assert info['moves_made'] == 0
    assert np.all(observation == BoardToken.NONE.value)


def test_numpy_action_is_accepted(env: FourInARowEnv) -> None:
    _, _, _, truncated, info = env.step(np.int64(4))
    assert not truncated
    assert info['moves_made'] == 1
