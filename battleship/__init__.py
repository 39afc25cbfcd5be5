"""
Message Battleship - a two-ship, 3x3 Battleship game whose state travels
between players as a URL inside a message.
"""

from .core import (
    AttemptOutcome,
    GamePhase,
    GameResult,
    GameRules,
    GameState,
    DEFAULT_RULES,
    AlreadyComplete,
    BattleshipError,
    InvalidPlacement,
    MalformedState,
    PhaseError,
)
from .board import BoardState, PlacementBoard
from .codec import StateCodec, decode, encode
from .mechanics import AttemptResult, TurnEvaluator, VictoryConditions, VictoryResult
from .events import GameEvent
from .session import GameSession

__all__ = [
    "AttemptOutcome",
    "GamePhase",
    "GameResult",
    "GameRules",
    "GameState",
    "DEFAULT_RULES",
    "AlreadyComplete",
    "BattleshipError",
    "InvalidPlacement",
    "MalformedState",
    "PhaseError",
    "BoardState",
    "PlacementBoard",
    "StateCodec",
    "decode",
    "encode",
    "AttemptResult",
    "TurnEvaluator",
    "VictoryConditions",
    "VictoryResult",
    "GameEvent",
    "GameSession",
]
