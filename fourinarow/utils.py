"""
utils.py - Constants, enumerations and helpers for the Four in a Row engine

This module provides the board dimensions, the token and color enumerations,
the status codes reported by the engine, and small helpers shared by the
board and game modules.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Tuple

import numpy as np

# Default game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

Position = Tuple[int, int]


@dataclass(frozen=True)
class BoardDimensions:
    """Immutable board configuration injected into the engine."""
    rows: int = ROWS
    columns: int = COLS
    win_line_length: int = CONNECT_N

    def __post_init__(self):
        if self.rows < 1 or self.columns < 1:
            raise ValueError(f"Board must have at least one row and column, got {self.rows}x{self.columns}")
        if self.win_line_length < 1:
            raise ValueError(f"Win line length must be positive, got {self.win_line_length}")

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns


DEFAULT_DIMENSIONS = BoardDimensions()


class BoardToken(Enum):
    """Values stored in board cells."""
    NONE = 0
    YELLOW = 1
    RED = 2

    def __str__(self):
        if self == BoardToken.YELLOW:
            return "Y"
        elif self == BoardToken.RED:
            return "R"
        return " "


class PlayerColor(Enum):
    """Enumeration representing the players (and the absence of one)."""
    NONE = 'none'
    RED = 'red'
    YELLOW = 'yellow'

    def other(self) -> 'PlayerColor':
        """Get the opposing color."""
        if self == PlayerColor.YELLOW:
            return PlayerColor.RED
        elif self == PlayerColor.RED:
            return PlayerColor.YELLOW
        return PlayerColor.NONE

    def to_token(self) -> BoardToken:
        """Get the token this color places on the board."""
        return COLOR_TO_TOKEN[self]


COLOR_TO_TOKEN: Dict[PlayerColor, BoardToken] = {
    PlayerColor.NONE: BoardToken.NONE,
    PlayerColor.YELLOW: BoardToken.YELLOW,
    PlayerColor.RED: BoardToken.RED,
}


class MoveStatus(Enum):
    """Outcome code of a single move."""
    INVALID = 'invalid'
    SUCCESS = 'success'
    WIN = 'win'
    DRAW = 'draw'


class GameStatus(Enum):
    """Status of a game as a whole."""
    START = 'start'
    IN_PROGRESS = 'in-progress'
    WIN = 'win'
    DRAW = 'draw'

    def is_game_over(self) -> bool:
        """Check if the game reached a terminal state."""
        return self in (GameStatus.WIN, GameStatus.DRAW)


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    VERTICAL = auto()  # Upwards from the start cell
    HORIZONTAL = auto()  # Leftwards from the start cell
    DIAGONAL_LEFT = auto()  # Up and to the left
    DIAGONAL_RIGHT = auto()  # Up and to the right


# Direction vectors (row, col), in the order the win scan tries them
DIRECTION_VECTORS = {
    Direction.VERTICAL: (-1, 0),
    Direction.HORIZONTAL: (0, -1),
    Direction.DIAGONAL_LEFT: (-1, -1),
    Direction.DIAGONAL_RIGHT: (-1, 1)
}


def board_token_to_player_color(token) -> PlayerColor:
    """
    Map a cell value to the color owning it.

    Args:
        token: A BoardToken or its integer value

    Returns:
        The owning color, PlayerColor.NONE for empty or unknown values
    """
    value = token.value if isinstance(token, BoardToken) else int(token)
    if value == BoardToken.YELLOW.value:
        return PlayerColor.YELLOW
    elif value == BoardToken.RED.value:
        return PlayerColor.RED
    return PlayerColor.NONE


def is_valid_position(row: int, col: int,
                      dimensions: BoardDimensions = DEFAULT_DIMENSIONS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        dimensions: Board dimensions to check against

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < dimensions.rows and 0 <= col < dimensions.columns


def line_positions(row: int, col: int, direction: Direction, length: int) -> List[Position]:
    """List the cells of a candidate line starting at (row, col)."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + step * dr, col + step * dc) for step in range(length)]


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game board

    Returns:
        ASCII representation of the board
    """
    rows, cols = board.shape
    result = []
    result.append("|" + "-" * (cols * 2 - 1) + "|")

    for row in range(rows):
        cells = [str(BoardToken(int(board[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (cols * 2 - 1) + "|")
    # Column numbers wrap past 9 so wide boards keep their alignment
    result.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(result)
