"""
Mechanics module - Turn resolution systems.

This module provides stateless resolvers for game actions:
- TurnEvaluator: Classifies attempts and completes finished games
- VictoryConditions: Checks game ending conditions

All resolvers are stateless - they take a GameState and return results
without modifying their own state.
"""

from .turns import AttemptResult, TurnEvaluator
from .victory import VictoryConditions, VictoryResult

__all__ = [
    "AttemptResult",
    "TurnEvaluator",
    "VictoryConditions",
    "VictoryResult",
]
