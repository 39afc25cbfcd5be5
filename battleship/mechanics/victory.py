"""
Victory condition checking for the Message Battleship engine.

This module provides pure logic for determining game outcomes:
- All ships hit (attacker wins)
- Too many misses (attacker loses)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..core.state import GameState
from ..core.types import DEFAULT_RULES, GameResult, GameRules


@dataclass
class VictoryResult:
    """
    Result of a victory condition check.

    Attributes:
        result: Game outcome (IN_PROGRESS, WON, LOST, FINISHED)
        reason: Human-readable explanation of the outcome
    """
    result: GameResult
    reason: str

    @property
    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return self.result != GameResult.IN_PROGRESS

    def __str__(self) -> str:
        if self.result == GameResult.IN_PROGRESS:
            return "Game in progress"
        return f"{self.result}: {self.reason}"

    def to_dict(self) -> Dict[str, Any]:
        return {"result": self.result.name, "reason": self.reason}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VictoryResult":
        return cls(result=GameResult[data["result"]], reason=data.get("reason", ""))


class VictoryConditions:
    """
    Stateless checker for game victory conditions.

    Usage:
        checker = VictoryConditions(rules)
        result = checker.check_all(state)

        if result.is_game_over:
            print(f"Game Over: {result.reason}")
    """

    def __init__(self, rules: GameRules = DEFAULT_RULES):
        self._rules = rules

    def check_all(self, state: GameState) -> VictoryResult:
        """
        Check all victory conditions in priority order.

        Checks are performed in this order:
        1. All ships hit
        2. Miss limit reached

        A state satisfying both counts as a win.
        """
        # Priority 1: every ship found
        result = self.check_all_ships_hit(state)
        if result.is_game_over:
            return result

        # Priority 2: out of lives
        result = self.check_miss_limit(state)
        if result.is_game_over:
            return result

        # Completed elsewhere, attempts were not carried over
        if state.is_complete:
            return VictoryResult(
                result=GameResult.FINISHED,
                reason="Game already finished"
            )

        return VictoryResult(
            result=GameResult.IN_PROGRESS,
            reason="Game ongoing"
        )

    def check_all_ships_hit(self, state: GameState) -> VictoryResult:
        """
        Every ship location has been attempted.

        Vacuously true for a game decoded without ship locations.
        """
        ships = state.ship_locations
        if ships.issubset(state.attempted_cells):
            return VictoryResult(
                result=GameResult.WON,
                reason=f"All {len(ships)} ships destroyed"
            )
        return VictoryResult(
            result=GameResult.IN_PROGRESS,
            reason=f"{len(ships) - len(state.hit_cells)} ship(s) remaining"
        )

    def check_miss_limit(self, state: GameState) -> VictoryResult:
        misses = len(state.missed_cells)
        limit = self._rules.incorrect_attempts_allowed
        if misses >= limit:
            return VictoryResult(
                result=GameResult.LOST,
                reason=f"{misses} incorrect attempts (limit {limit})"
            )
        return VictoryResult(
            result=GameResult.IN_PROGRESS,
            reason=f"{limit - misses} lives remaining"
        )
