"""
Presentation contract between the engine and whatever displays it.

Adapters receive one tagged event at a time through Presenter.present().
Events carry states and errors, never formatted text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

from .errors import InvalidInput, InvalidPosition, MoveError, PositionTaken
from .game import GameState

EXIT_OK = 0


class ExitReason(Enum):
    INVALID_INPUT = "InvalidInput"
    OUT_OF_RANGE = "OutOfRange"
    POSITION_TAKEN = "PositionTaken"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    ExitReason.INVALID_INPUT: 2,
    ExitReason.OUT_OF_RANGE: 3,
    ExitReason.POSITION_TAKEN: 4,
}


def exit_reason_for(error: MoveError) -> ExitReason:
    if isinstance(error, PositionTaken):
        return ExitReason.POSITION_TAKEN
    if isinstance(error, InvalidPosition):
        return ExitReason.OUT_OF_RANGE
    if isinstance(error, InvalidInput):
        return ExitReason.INVALID_INPUT
    raise TypeError(f"Unsupported move error: {type(error).__name__}")


@dataclass(frozen=True)
class StatePresented:
    state: GameState


@dataclass(frozen=True)
class GameOverPresented:
    state: GameState


@dataclass(frozen=True)
class MoveRejected:
    position: object
    error: MoveError

    @property
    def exit_reason(self) -> ExitReason:
        return exit_reason_for(self.error)


@dataclass(frozen=True)
class MoveIgnored:
    """A move was attempted after the game had already ended."""

    position: object
    state: GameState


PresentationEvent = Union[StatePresented, GameOverPresented, MoveRejected, MoveIgnored]


class Presenter(Protocol):
    def present(self, event: PresentationEvent) -> None:
        ...
