"""ttt_engine package.

Immutable tic-tac-toe state machine, typed move errors, a presentation
contract, and a serialized session host.

Convenience imports are exposed for common workflows.
"""

from .errors import InvalidInput, InvalidPosition, MoveError, PositionTaken
from .game import GameState, legal_moves, play, replay, start
from .session import GameSession

__all__ = [
    "start",
    "play",
    "replay",
    "legal_moves",
    "GameState",
    "GameSession",
    "MoveError",
    "InvalidInput",
    "InvalidPosition",
    "PositionTaken",
]
