"""
fourinarow.game - Core game mechanics for Four in a Row

This package contains the board operations, the game engine with its
result types, and the Gymnasium environment wrapping the engine.
"""

from fourinarow.game.board import check_for_filled_board, check_for_win, create_board
from fourinarow.game.env import FourInARowEnv
from fourinarow.game.rules import GameEngine, GameState, MoveResult

__all__ = ['GameEngine', 'GameState', 'MoveResult', 'FourInARowEnv',
           'create_board', 'check_for_win', 'check_for_filled_board']
