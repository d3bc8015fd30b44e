"""
Game basics: marks, positions, winning lines, and board checks.
Teaching notes:
- Positions are numbered 1..9, left-to-right, top-to-bottom.
- A board is a tuple of 9 cells: None=empty, "X" or "O". Position p lives at index p - 1.
- X always starts. Only the player who just moved can complete a line.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Optional, Sequence, Tuple

PLAYER_X = "X"
PLAYER_O = "O"
PLAYERS = (PLAYER_X, PLAYER_O)
INITIAL_PLAYER = PLAYER_X

MIN_POSITION = 1
MAX_POSITION = 9
POSITIONS: Tuple[int, ...] = tuple(range(MIN_POSITION, MAX_POSITION + 1))

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # rows
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    # columns
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    # diagonals
    (1, 5, 9), (3, 5, 7),
)

ERROR_INVALID_INPUT = "Invalid input: enter a number 1-9"
ERROR_INVALID_POSITION = "Invalid position: choose 1-9"
ERROR_POSITION_TAKEN = "Position already taken"

Board = Tuple[Optional[str], ...]

EMPTY_BOARD: Board = (None,) * len(POSITIONS)


def cell_index(position: int) -> int:
    return position - MIN_POSITION


def position_of(index: int) -> int:
    return index + MIN_POSITION


def other_player(player: str) -> str:
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player!r}")
    return PLAYER_O if player == PLAYER_X else PLAYER_X


def has_line_win(board: Sequence[Optional[str]], player: str, line: Sequence[int]) -> bool:
    return all(board[cell_index(p)] == player for p in line)


def winning_line(board: Sequence[Optional[str]], player: str) -> Optional[Tuple[int, int, int]]:
    for line in WIN_LINES:
        if has_line_win(board, player, line):
            return line
    return None


def is_full(board: Sequence[Optional[str]]) -> bool:
    return None not in board


def is_numeric_input(value: object) -> bool:
    """True for finite real numbers. bool, str and None are not moves."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_valid_position(value: object) -> bool:
    if not is_numeric_input(value):
        return False
    # 5.0 is a position, 5.5 is not
    if value != int(value):  # type: ignore[call-overload]
        return False
    return MIN_POSITION <= value <= MAX_POSITION  # type: ignore[operator]
