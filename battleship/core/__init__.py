"""
Core types, errors and state for the Message Battleship engine.
"""

# Instead of from battleship.core.types import GameRules, you can do: from battleship.core import GameRules
from .types import (
    CELL_COUNT,
    CELLS_PER_ROW,
    TOTAL_SHIP_COUNT,
    INCORRECT_ATTEMPTS_ALLOWED,
    DEFAULT_BASE_URL,
    DEFAULT_RULES,
    AttemptOutcome,
    EventType,
    GamePhase,
    GameResult,
    GameRules,
)
from .errors import (
    AlreadyComplete,
    BattleshipError,
    InvalidPlacement,
    MalformedState,
    PhaseError,
)
from .state import GameState


__all__ = [
    "CELL_COUNT",
    "CELLS_PER_ROW",
    "TOTAL_SHIP_COUNT",
    "INCORRECT_ATTEMPTS_ALLOWED",
    "DEFAULT_BASE_URL",
    "DEFAULT_RULES",
    "AttemptOutcome",
    "EventType",
    "GamePhase",
    "GameResult",
    "GameRules",
    "AlreadyComplete",
    "BattleshipError",
    "InvalidPlacement",
    "MalformedState",
    "PhaseError",
    "GameState",
]
