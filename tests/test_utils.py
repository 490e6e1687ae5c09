"""Unit tests for fourinarow/utils.py"""

import numpy as np
import pytest

from fourinarow.utils import (DEFAULT_DIMENSIONS, DIRECTION_VECTORS, BoardDimensions, BoardToken,
                              Direction, GameStatus, PlayerColor, board_token_to_player_color,
                              is_valid_position, line_positions, render_board_ascii)


# -- DIMENSIONS --
def test_default_dimensions() -> None:
    assert DEFAULT_DIMENSIONS.rows == 6
    assert DEFAULT_DIMENSIONS.columns == 7
    assert DEFAULT_DIMENSIONS.win_line_length == 4
    assert DEFAULT_DIMENSIONS.shape == (6, 7)
    assert DEFAULT_DIMENSIONS.cell_count == 42


def test_dimensions_are_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_DIMENSIONS.rows = 8  # type: ignore[misc]


@pytest.mark.parametrize("rows, columns, length", [(0, 7, 4), (6, 0, 4), (6, 7, 0), (-1, 7, 4)])
def test_dimensions_reject_non_positive_sizes(rows: int, columns: int, length: int) -> None:
    with pytest.raises(ValueError):
        BoardDimensions(rows=rows, columns=columns, win_line_length=length)


# -- COLORS AND TOKENS --
def test_other_color() -> None:
    assert PlayerColor.YELLOW.other() == PlayerColor.RED
    assert PlayerColor.RED.other() == PlayerColor.YELLOW
    assert PlayerColor.NONE.other() == PlayerColor.NONE


def test_color_to_token() -> None:
    assert PlayerColor.YELLOW.to_token() == BoardToken.YELLOW
    assert PlayerColor.RED.to_token() == BoardToken.RED
    assert PlayerColor.NONE.to_token() == BoardToken.NONE


@pytest.mark.parametrize(
    "token, expected",
    [
        (BoardToken.YELLOW, PlayerColor.YELLOW),
        (BoardToken.RED, PlayerColor.RED),
        (BoardToken.NONE, PlayerColor.NONE),
        (1, PlayerColor.YELLOW),
        (np.int64(2), PlayerColor.RED),
        (7, PlayerColor.NONE),
    ],
)
def test_board_token_to_player_color(token, expected: PlayerColor) -> None:
    assert board_token_to_player_color(token) == expected


def test_game_status_terminal_states() -> None:
    assert GameStatus.WIN.is_game_over()
    assert GameStatus.DRAW.is_game_over()
    assert not GameStatus.START.is_game_over()
    assert not GameStatus.IN_PROGRESS.is_game_over()


# -- POSITIONS --
@pytest.mark.parametrize(
    "row, col, expected",
    [(0, 0, True), (5, 6, True), (6, 0, False), (0, 7, False), (-1, 3, False), (3, -1, False)],
)
def test_is_valid_position_excludes_dimension_itself(row: int, col: int, expected: bool) -> None:
    assert is_valid_position(row, col) is expected


def test_is_valid_position_uses_given_dimensions() -> None:
    small = BoardDimensions(rows=2, columns=3, win_line_length=2)
    assert is_valid_position(1, 2, small)
    assert not is_valid_position(2, 2, small)


def test_direction_scan_order() -> None:
    assert list(DIRECTION_VECTORS) == [
        Direction.VERTICAL,
        Direction.HORIZONTAL,
        Direction.DIAGONAL_LEFT,
        Direction.DIAGONAL_RIGHT,
    ]
    assert list(DIRECTION_VECTORS.values()) == [(-1, 0), (0, -1), (-1, -1), (-1, 1)]


def test_line_positions_follow_direction() -> None:
    assert line_positions(5, 3, Direction.HORIZONTAL, 4) == [(5, 3), (5, 2), (5, 1), (5, 0)]
    assert line_positions(5, 0, Direction.DIAGONAL_RIGHT, 4) == [(5, 0), (4, 1), (3, 2), (2, 3)]


# -- RENDERING --
def test_render_board_ascii() -> None:
    board = np.zeros((6, 7), dtype=int)
    board[5, 0] = BoardToken.YELLOW.value
    board[5, 1] = BoardToken.RED.value

    lines = render_board_ascii(board).split("\n")

    assert len(lines) == 6 + 3
    assert lines[0] == "|-------------|"
    assert lines[6] == "|Y R          |"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
