"""
board.py - Board representation and core mechanics for Four in a Row

This module implements the board operations used by the game engine:
creating and copying boards, dropping tokens, scanning for winning lines
and detecting a full board. Boards are numpy arrays of BoardToken values,
row 0 at the top.

There is no Board class: the engine keeps its history as plain arrays so
snapshots can be frozen, compared and handed out as data. The functions
here take the place of the methods such a class would carry.
"""

from typing import Any, List, Optional, Tuple

import numpy as np

from fourinarow.debug import debug
from fourinarow.utils import (DEFAULT_DIMENSIONS, DIRECTION_VECTORS, BoardDimensions,
                              BoardToken, PlayerColor, Position,
                              board_token_to_player_color, is_valid_position,
                              line_positions)

TOKEN_VALUES = frozenset(token.value for token in BoardToken)


def create_board(dimensions: BoardDimensions = DEFAULT_DIMENSIONS) -> np.ndarray:
    """Create an empty board."""
    return np.full(dimensions.shape, BoardToken.NONE.value, dtype=int)


def copy_board(board: np.ndarray) -> np.ndarray:
    """
    Create an independent, writable copy of a board.

    Copies of read-only history snapshots are writable again.
    """
    return np.array(board, dtype=int, copy=True)


def freeze_board(board: np.ndarray) -> np.ndarray:
    """Mark a board read-only so it can be stored as a history snapshot."""
    board.flags.writeable = False
    return board


def drop_token(board: np.ndarray, column: int, token: BoardToken) -> Optional[int]:
    """
    Drop a token into a column, in place.

    The column is scanned from the bottom row upwards and the token lands
    in the first empty cell.

    Args:
        board: The board to modify
        column: Column index, assumed to be in bounds
        token: Token to place

    Returns:
        The row the token landed in, or None if the column is full
    """
    for row in range(board.shape[0] - 1, -1, -1):
        if board[row, column] == BoardToken.NONE.value:
            debug.trace(f"Placing {token.name} at ({row}, {column})", "board")
            board[row, column] = token.value
            return row

    debug.debug(f"Column {column} is full", "board")
    return None


def get_valid_moves(board: np.ndarray) -> List[int]:
    """Get the columns that still have room for a token."""
    return [col for col in range(board.shape[1]) if board[0, col] == BoardToken.NONE.value]


def _is_winning_line(board: np.ndarray, positions: List[Position],
                     dimensions: BoardDimensions) -> bool:
    first = None
    for row, col in positions:
        # Stop before reading anything outside the board
        if not is_valid_position(row, col, dimensions):
            return False
        value = board[row, col]
        if value == BoardToken.NONE.value:
            return False
        if first is None:
            first = value
        elif value != first:
            return False
    return True


def check_for_win(board: np.ndarray,
                  dimensions: BoardDimensions = DEFAULT_DIMENSIONS) -> Tuple[PlayerColor, List[Position]]:
    """
    Scan the board for a winning line.

    Every cell is tried as the start of a line, columns left to right and
    rows bottom to top within a column. At each cell the directions are
    tried in DIRECTION_VECTORS order (vertical, horizontal, left diagonal,
    right diagonal). The first complete line found is reported.

    Args:
        board: The board to scan
        dimensions: Board dimensions, including the win line length

    Returns:
        Tuple of (winner, winning line). The line lists its cells from the
        start cell in scan direction. (PlayerColor.NONE, []) if no line exists.
    """
    length = dimensions.win_line_length
    for col in range(dimensions.columns):
        for row in range(dimensions.rows - 1, -1, -1):
            if board[row, col] == BoardToken.NONE.value:
                continue
            for direction in DIRECTION_VECTORS:
                positions = line_positions(row, col, direction, length)
                if _is_winning_line(board, positions, dimensions):
                    winner = board_token_to_player_color(board[row, col])
                    debug.debug(f"{winner.name} has a {direction.name.lower()} line at {positions}", "board")
                    return winner, positions

    return PlayerColor.NONE, []


def check_for_filled_board(board: np.ndarray) -> bool:
    """Check whether every cell holds a token."""
    return not np.any(board == BoardToken.NONE.value)


def board_to_list(board: np.ndarray) -> List[List[int]]:
    """Convert a board to nested lists of ints."""
    return np.asarray(board).tolist()


def find_dropped_token(before: np.ndarray, after: np.ndarray) -> Optional[Tuple[int, int, int]]:
    """
    Find the single drop that turns one board into the next.

    Args:
        before: Board before the move
        after: Board after the move

    Returns:
        (row, column, token value) of the drop, or None if the boards differ
        by anything other than one token landing on the bottom row or on
        top of another token
    """
    changed = np.argwhere(before != after)
    if len(changed) != 1:
        return None

    row, col = (int(index) for index in changed[0])
    if before[row, col] != BoardToken.NONE.value:
        return None

    # No floating tokens: the cell below must already be filled
    if row < after.shape[0] - 1 and after[row + 1, col] == BoardToken.NONE.value:
        return None

    return row, col, int(after[row, col])


def normalize_board(data: Any, dimensions: BoardDimensions = DEFAULT_DIMENSIONS) -> Optional[np.ndarray]:
    """
    Convert loaded board data into a board.

    Integer data is taken as is. Float data is accepted only when every
    value is a whole number; strings, booleans and anything else are rejected.

    Args:
        data: A numpy array or nested sequence of cell values
        dimensions: Expected board dimensions

    Returns:
        A new writable board, or None if the data has the wrong shape or
        holds values that are not tokens
    """
    try:
        raw = np.array(data)
    except (TypeError, ValueError):
        return None

    if raw.shape != dimensions.shape:
        return None

    if np.issubdtype(raw.dtype, np.floating):
        if not np.all(np.isfinite(raw)) or not np.all(raw == np.round(raw)):
            return None
    elif not np.issubdtype(raw.dtype, np.integer):
        return None

    board = raw.astype(int)
    if not set(np.unique(board).tolist()) <= TOKEN_VALUES:
        return None

    return board
