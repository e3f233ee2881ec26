"""Tests for the Gymnasium environment adapter."""

import numpy as np
import pytest

from connect4.game.rules import ConnectFourEnv
from connect4.utils import ROWS, COLS, Cell


@pytest.fixture
def env():
    env = ConnectFourEnv()
    env.reset(seed=0)
    yield env
    env.close()


def play(env, actions):
    result = None
    for action in actions:
        result = env.step(action)
    return result


def test_reset_returns_empty_board(env):
    observation, info = env.reset(seed=1)
    assert observation.shape == (ROWS, COLS)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['valid_moves'] == list(range(COLS))
    assert info['current_player'] == 1
    assert info['game_status'] == 'IN_PROGRESS'
    assert info['moves_made'] == 0


def test_regular_step(env):
    observation, reward, terminated, truncated, info = env.step(3)
    assert observation[ROWS - 1, 3] == Cell.ONE
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == 2
    assert info['moves_made'] == 1


def test_player_one_win_rewards_win(env):
    _, reward, terminated, truncated, info = play(env, [0, 1, 0, 1, 0, 1, 0])
    assert reward == env.reward_win
    assert terminated and not truncated
    assert info['game_status'] == 'WIN'
    assert info['winner'] == 1
    assert info['valid_moves'] == []


def test_player_two_win_rewards_lose(env):
    _, reward, terminated, _, info = play(env, [0, 1, 0, 1, 0, 1, 2, 1])
    assert reward == env.reward_lose
    assert terminated
    assert info['winner'] == 2


def test_full_column_is_invalid_move(env):
    play(env, [0] * ROWS)
    before = env.engine.grid()
    observation, reward, terminated, truncated, info = env.step(0)
    assert reward == env.reward_invalid_move
    assert not terminated and truncated
    assert info['invalid_move'] is True
    assert info['error'] == 'COLUMN_FULL'
    np.testing.assert_array_equal(observation, before)


def test_step_after_game_over_is_invalid(env):
    play(env, [0, 1, 0, 1, 0, 1, 0])
    _, reward, _, truncated, info = env.step(4)
    assert reward == env.reward_invalid_move
    assert truncated
    assert info['error'] == 'GAME_OVER'


def test_sampled_actions_are_accepted(env):
    action = env.action_space.sample()
    _, _, _, truncated, info = env.step(action)
    assert not truncated
    assert info['moves_made'] == 1


def test_ascii_render():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset()
    env.step(6)
    frame = env.render()
    assert frame.splitlines()[ROWS] == "|            X|"


def test_human_render_prints(capsys):
    env = ConnectFourEnv(render_mode="human")
    env.reset()
    assert "|0 1 2 3 4 5 6|" in capsys.readouterr().out
