"""
Typed move failures raised by the engine.

Callers branch on the exception class; the message of each kind is stable
so presentation layers that match on text keep working.
"""
from __future__ import annotations

from .game_basics import ERROR_INVALID_INPUT, ERROR_INVALID_POSITION, ERROR_POSITION_TAKEN


class MoveError(ValueError):
    """Base class for every rejected move."""


class InvalidInput(MoveError):
    def __init__(self, value: object = None) -> None:
        super().__init__(ERROR_INVALID_INPUT)
        self.value = value


class InvalidPosition(MoveError):
    def __init__(self, position: object = None) -> None:
        super().__init__(ERROR_INVALID_POSITION)
        self.position = position


class PositionTaken(MoveError):
    def __init__(self, position: int) -> None:
        super().__init__(ERROR_POSITION_TAKEN)
        self.position = position
