"""
A host that owns one logical game and serializes moves against it.

The engine is pure; GameSession is the single owner of the "current state"
cell. Reading the current state and storing the next one happen under one
lock, so concurrent callers never lose a move. Events are delivered after
the lock is released, so a presenter may call back into the session.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from .errors import MoveError
from .game import GameState, play, start
from .ports import (
    EXIT_OK,
    GameOverPresented,
    MoveIgnored,
    MoveRejected,
    PresentationEvent,
    Presenter,
    StatePresented,
)

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, presenters: Iterable[Presenter] = ()) -> None:
        self._presenters: List[Presenter] = list(presenters)
        self._lock = threading.Lock()
        self._state: Optional[GameState] = None
        self._exit_code = EXIT_OK

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def exit_code(self) -> int:
        """Highest exit code among rejected moves, 0 if none."""
        return self._exit_code

    def subscribe(self, presenter: Presenter) -> None:
        with self._lock:
            self._presenters.append(presenter)

    def _publish(self, presenters: List[Presenter], events: List[PresentationEvent]) -> None:
        # called without the lock held; presenters may call back into the session
        for event in events:
            for presenter in presenters:
                presenter.present(event)

    def start(self) -> GameState:
        with self._lock:
            state = self._state = start()
            self._exit_code = EXIT_OK
            presenters = list(self._presenters)
        logger.debug("New game started")
        self._publish(presenters, [StatePresented(state)])
        return state

    def move(self, position: object) -> Optional[GameState]:
        """Apply one move to the current game.

        Returns the resulting state, or None when no game has been started.
        Rejected moves are published and leave the state untouched.
        """
        events: List[PresentationEvent] = []
        with self._lock:
            current = self._state
            if current is None:
                logger.debug("Move %r before start; ignored", position)
                return None
            presenters = list(self._presenters)
            if current.is_over:
                result = current
                events.append(MoveIgnored(position, current))
            else:
                try:
                    result = play(current, position)
                except MoveError as e:
                    result = current
                    rejected = MoveRejected(position, e)
                    self._exit_code = max(self._exit_code, rejected.exit_reason.exit_code)
                    logger.debug("Move %r rejected: %s", position, e)
                    events.append(rejected)
                else:
                    self._state = result
                    events.append(StatePresented(result))
                    if result.is_over:
                        events.append(GameOverPresented(result))
        if isinstance(events[-1], GameOverPresented):
            if result.winner is not None:
                logger.info("Game over: player %s wins after %d moves", result.winner, result.move_count)
            else:
                logger.info("Game over: draw after %d moves", result.move_count)
        self._publish(presenters, events)
        return result
