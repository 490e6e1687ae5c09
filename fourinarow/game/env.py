"""
env.py - Gymnasium environment for Four in a Row

This module wraps the GameEngine in the Gymnasium Env interface so that
agents and harnesses can drive a game through reset/step/render. The
environment never chooses moves itself.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from fourinarow.debug import debug
from fourinarow.game.rules import GameEngine, MoveResult
from fourinarow.utils import DEFAULT_DIMENSIONS, BoardDimensions, BoardToken, MoveStatus


class FourInARowEnv(gym.Env):
    """
    Four in a Row environment following the Gymnasium interface.

    Rewards are given from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 dimensions: Optional[BoardDimensions] = None):
        """
        Initialize the environment.

        Args:
            render_mode: 'ascii', 'human' or None
            dimensions: Board dimensions (default 6x7, four to win)
        """
        debug.debug("Initializing FourInARowEnv", "env")
        self.dimensions = dimensions or DEFAULT_DIMENSIONS

        self.action_space = spaces.Discrete(self.dimensions.columns)
        self.observation_space = spaces.Box(
            low=BoardToken.NONE.value, high=BoardToken.RED.value,
            shape=self.dimensions.shape, dtype=np.int8
        )

        self.engine = GameEngine(dimensions=self.dimensions)
        self.render_mode = render_mode
        self.last_result: Optional[MoveResult] = None

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Args:
            seed: Random seed, forwarded to Gymnasium
            options: Optional 'starting_color' and 'history' to resume a game

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        options = options or {}
        self.engine = GameEngine(starting_color=options.get('starting_color'),
                                 history=options.get('history'),
                                 dimensions=self.dimensions)
        self.last_result = None
        debug.debug(f"Environment reset, {self.engine.current_turn.name} to move", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: Any) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the current player's token into the chosen column.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.play_move(action)
        self.last_result = result

        if result.status == MoveStatus.INVALID:
            debug.warning(f"Invalid action {action}: {result.message}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.status == MoveStatus.WIN:
            reward = self.reward_win
            terminated = True
        elif result.status == MoveStatus.DRAW:
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        elif self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.astype(np.int8)

    def _get_info(self) -> Dict:
        result = self.last_result
        valid_moves = self.engine.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_turn.value,
            'game_status': self.engine.status.value,
            'moves_made': self.engine.moves_played,
            'winning_line': list(result.win_line) if result else [],
            'move_status': result.status.value if result else None,
            'message': result.message if result else "",
        }
