"""
rules.py - Game state management for Four in a Row

This module provides the GameEngine, which owns the board history, the turn
order and the game status, and the value objects it reports:
1. MoveResult, returned by every call to GameEngine.play_move
2. GameState, a snapshot of the whole game for rendering or saving
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.board import (board_to_list, check_for_filled_board, check_for_win,
                                   copy_board, create_board, drop_token, find_dropped_token,
                                   freeze_board, get_valid_moves, normalize_board)
from fourinarow.utils import (DEFAULT_DIMENSIONS, BoardDimensions, BoardToken, GameStatus,
                              MoveStatus, PlayerColor, Position, render_board_ascii)

OUT_OF_RANGE_MESSAGE = "Selected column is outside of range of board columns"
COLUMN_FILLED_MESSAGE = "Selected column is filled"


@dataclass(frozen=True, eq=False)
class MoveResult:
    """Outcome of a single call to GameEngine.play_move."""
    board: np.ndarray
    winner: PlayerColor
    status: MoveStatus
    win_line: List[Position] = field(default_factory=list)
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status != MoveStatus.INVALID

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data representation of the result."""
        return {
            'board': board_to_list(self.board),
            'winner': self.winner.value,
            'status': self.status.value,
            'message': self.message,
            'win_line': [list(position) for position in self.win_line],
        }


@dataclass(frozen=True, eq=False)
class GameState:
    """Snapshot of a game: who started, whose turn it is, status and history."""
    starting_color: PlayerColor
    current_turn: PlayerColor
    status: GameStatus
    history: List[np.ndarray]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'starting_color': self.starting_color.value,
            'current_turn': self.current_turn.value,
            'status': self.status.value,
            'history': [board_to_list(board) for board in self.history],
        }


def _normalize_color(color: Any) -> Optional[PlayerColor]:
    if isinstance(color, PlayerColor):
        return color if color != PlayerColor.NONE else None
    if isinstance(color, str):
        try:
            parsed = PlayerColor(color.strip().lower())
        except ValueError:
            return None
        return parsed if parsed != PlayerColor.NONE else None
    return None


class GameEngine:
    """
    Four in a Row rules engine.

    The engine owns an append-only history of read-only board snapshots.
    Whose turn it is follows from the starting color and the history length;
    it is never stored separately.
    """

    def __init__(self, starting_color: Any = None, history: Optional[Sequence[Any]] = None,
                 dimensions: Optional[BoardDimensions] = None):
        """
        Initialize a new game, or resume one from a recorded history.

        Args:
            starting_color: Color that makes the first move (default YELLOW).
                Accepts a PlayerColor or its string value.
            history: Previously recorded boards, starting with the empty board
            dimensions: Board dimensions (default 6x7, four to win)

        Malformed arguments are replaced by their defaults.
        """
        self._dimensions = dimensions or DEFAULT_DIMENSIONS

        self._starting_color = _normalize_color(starting_color)
        if self._starting_color is None:
            if starting_color is not None:
                debug.warning(f"Ignoring invalid starting color {starting_color!r}", "game")
            self._starting_color = PlayerColor.YELLOW

        self._history = self._load_history(history)
        self._status = self._initial_status()
        debug.debug(f"Initialized GameEngine: {len(self._history) - 1} moves, "
                    f"status {self._status.name}, {self.current_turn.name} to move", "game")

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None,
                     dimensions: Optional[BoardDimensions] = None) -> 'GameEngine':
        """Create an engine from an options mapping ('startingColor', 'history')."""
        if not isinstance(options, dict):
            options = {}
        starting_color = options.get('startingColor', options.get('starting_color'))
        return cls(starting_color=starting_color, history=options.get('history'),
                   dimensions=dimensions)

    def _load_history(self, history: Optional[Sequence[Any]]) -> List[np.ndarray]:
        default = [freeze_board(create_board(self._dimensions))]
        if history is None:
            return default

        if isinstance(history, (str, bytes)) or not hasattr(history, '__len__') or len(history) == 0:
            debug.warning("Ignoring empty or malformed history", "game")
            return default

        boards = []
        for index, data in enumerate(history):
            board = normalize_board(data, self._dimensions)
            if board is None:
                debug.warning(f"Ignoring history: board {index} is malformed", "game")
                return default
            boards.append(freeze_board(board))

        if np.any(boards[0] != BoardToken.NONE.value):
            debug.warning("Ignoring history: first board is not empty", "game")
            return default

        # Every snapshot must follow from the previous one by a single legal drop
        mover = self._starting_color
        for index in range(1, len(boards)):
            previous = boards[index - 1]
            if check_for_win(previous, self._dimensions)[0] != PlayerColor.NONE:
                debug.warning(f"Ignoring history: board {index} follows a finished game", "game")
                return default

            drop = find_dropped_token(previous, boards[index])
            if drop is None:
                debug.warning(f"Ignoring history: board {index} is not a single drop", "game")
                return default

            if drop[2] != mover.to_token().value:
                debug.warning(f"Ignoring history: board {index} is not {mover.name}'s move", "game")
                return default
            mover = mover.other()

        return boards

    def _initial_status(self) -> GameStatus:
        if len(self._history) == 1:
            return GameStatus.START

        board = self._history[-1]
        winner, _ = check_for_win(board, self._dimensions)
        if winner != PlayerColor.NONE:
            return GameStatus.WIN
        if check_for_filled_board(board):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    # --- read-only accessors ---

    @property
    def dimensions(self) -> BoardDimensions:
        return self._dimensions

    @property
    def starting_color(self) -> PlayerColor:
        return self._starting_color

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_turn(self) -> PlayerColor:
        """Color to move, derived from the number of moves played."""
        moves_played = len(self._history) - 1
        if moves_played % 2 == 0:
            return self._starting_color
        return self._starting_color.other()

    @property
    def board(self) -> np.ndarray:
        """Copy of the current board."""
        return copy_board(self._history[-1])

    @property
    def history(self) -> List[np.ndarray]:
        """The recorded boards. Entries are read-only snapshots."""
        return list(self._history)

    @property
    def moves_played(self) -> int:
        return len(self._history) - 1

    def get_state(self) -> GameState:
        return GameState(
            starting_color=self._starting_color,
            current_turn=self.current_turn,
            status=self._status,
            history=self.history,
        )

    def get_valid_moves(self) -> List[int]:
        """Columns that accept a token, empty once the game is over."""
        if self.is_game_over():
            return []
        return get_valid_moves(self._history[-1])

    def is_game_over(self) -> bool:
        return self._status.is_game_over()

    def render(self) -> str:
        return render_board_ascii(self._history[-1])

    # --- moves ---

    def play_move(self, column: int) -> MoveResult:
        """
        Drop the current player's token into a column.

        Args:
            column: Column index, 0-indexed

        Returns:
            MoveResult describing the outcome. Rejected moves are reported
            with MoveStatus.INVALID and leave the game untouched. Once the
            game is over every call returns the final outcome again.
        """
        if self.is_game_over():
            debug.debug(f"Game is over ({self._status.name}), not playing column {column}", "game")
            return self._evaluate(copy_board(self._history[-1]))

        next_board = copy_board(self._history[-1])

        if not self._is_column_in_range(column):
            debug.debug(f"Invalid move: column {column!r} out of bounds", "game")
            return MoveResult(board=next_board, winner=PlayerColor.NONE,
                              status=MoveStatus.INVALID, message=OUT_OF_RANGE_MESSAGE)

        if self._status == GameStatus.START:
            self._status = GameStatus.IN_PROGRESS

        player = self.current_turn
        row = drop_token(next_board, column, player.to_token())
        if row is None:
            debug.debug(f"Invalid move: column {column} is full", "game")
            return MoveResult(board=next_board, winner=PlayerColor.NONE,
                              status=MoveStatus.INVALID, message=COLUMN_FILLED_MESSAGE)

        self._history.append(freeze_board(copy_board(next_board)))
        debug.debug(f"{player.name} played ({row}, {column}), move {self.moves_played}", "game")

        debug.start_timer("win_check")
        result = self._evaluate(next_board)
        debug.end_timer("win_check", "game")

        if result.status == MoveStatus.WIN:
            self._status = GameStatus.WIN
            debug.info(f"{result.winner.name} wins with {result.win_line}", "game")
        elif result.status == MoveStatus.DRAW:
            self._status = GameStatus.DRAW
            debug.info("Game ends in a draw", "game")

        return result

    def _is_column_in_range(self, column: Any) -> bool:
        if isinstance(column, (bool, np.bool_)) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self._dimensions.columns

    def _evaluate(self, board: np.ndarray) -> MoveResult:
        """Classify a board reached by a valid move: win, then draw, else success."""
        winner, win_line = check_for_win(board, self._dimensions)
        if winner != PlayerColor.NONE:
            return MoveResult(board=board, winner=winner, status=MoveStatus.WIN, win_line=win_line)

        if check_for_filled_board(board):
            return MoveResult(board=board, winner=PlayerColor.NONE, status=MoveStatus.DRAW)

        return MoveResult(board=board, winner=PlayerColor.NONE, status=MoveStatus.SUCCESS)
