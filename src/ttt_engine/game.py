"""
Immutable tic-tac-toe state machine.
Teaching notes:
- start() builds the initial state; play() derives a new state per move and never mutates.
- Validation order matters: game over (no-op) -> not a number -> out of range -> taken.
- A terminal state absorbs further moves silently; callers inspect is_over/winner.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .errors import InvalidInput, InvalidPosition, PositionTaken
from .game_basics import (
    EMPTY_BOARD,
    INITIAL_PLAYER,
    POSITIONS,
    Board,
    cell_index,
    is_full,
    is_numeric_input,
    is_valid_position,
    other_player,
    position_of,
    winning_line,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    current_player: str
    board: Board
    available_positions: Tuple[int, ...]
    is_over: bool = False
    is_draw: bool = False
    winner: Optional[str] = None

    def mark_at(self, position: int) -> Optional[str]:
        return self.board[cell_index(position)]

    @property
    def marked_positions(self) -> Tuple[int, ...]:
        return tuple(position_of(i) for i, v in enumerate(self.board) if v is not None)

    @property
    def move_count(self) -> int:
        return len(POSITIONS) - len(self.available_positions)


def start() -> GameState:
    """Empty board, X to move."""
    return GameState(
        current_player=INITIAL_PLAYER,
        board=EMPTY_BOARD,
        available_positions=POSITIONS,
    )


def _validate(state: GameState, position: object) -> int:
    if not is_numeric_input(position):
        raise InvalidInput(position)
    if not is_valid_position(position):
        raise InvalidPosition(position)
    pos = int(position)  # type: ignore[call-overload]
    if state.mark_at(pos) is not None:
        raise PositionTaken(pos)
    return pos


def _next_state(prev: GameState, position: int) -> GameState:
    mover = prev.current_player
    cells = list(prev.board)
    cells[cell_index(position)] = mover
    board = tuple(cells)
    available = tuple(p for p in prev.available_positions if p != position)

    has_win = winning_line(board, mover) is not None
    winner = mover if has_win else None
    full = is_full(board)
    is_draw = not has_win and full
    is_over = has_win or full
    return GameState(
        current_player=mover if is_over else other_player(mover),
        board=board,
        available_positions=available,
        is_over=is_over,
        is_draw=is_draw,
        winner=winner,
    )


def play(state: GameState, *positions: object) -> GameState:
    """Apply positions left to right.

    Raises InvalidInput, InvalidPosition or PositionTaken on the first bad
    move; the rest of the batch is not applied. Moves against a finished
    game return the state unchanged.
    """
    for position in positions:
        if state.is_over:
            logger.debug("Game over; ignoring move %r", position)
            continue
        pos = _validate(state, position)
        state = _next_state(state, pos)
        logger.debug("%s -> %d", state.board[cell_index(pos)], pos)
        if state.is_over:
            if state.winner is not None:
                logger.debug("Player %s wins after %d moves", state.winner, state.move_count)
            else:
                logger.debug("Draw after %d moves", state.move_count)
    return state


def replay(positions: Iterable[object]) -> GameState:
    return play(start(), *positions)


def legal_moves(state: GameState) -> Tuple[int, ...]:
    if state.is_over:
        return ()
    return state.available_positions
