"""
Core type definitions for the Message Battleship engine.

This module contains the fundamental enums, constants and the rules value
object used throughout the system. No game logic, just data structures.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict

# ============================================================================
# CONSTANTS
# ============================================================================

# 3x3 board, cells indexed 0..8 row by row
CELLS_PER_ROW = 3
CELL_COUNT = CELLS_PER_ROW * CELLS_PER_ROW

# Number of ships the placing player hides
TOTAL_SHIP_COUNT = 2

# Number of misses the attacking player can afford
INCORRECT_ATTEMPTS_ALLOWED = 3

# Prefix of every encoded game URL
DEFAULT_BASE_URL = "www.shinobicontrols.com/battleship"


# ============================================================================
# OUTCOMES
# ============================================================================

class AttemptOutcome(Enum):
    """Classification of a single attack attempt."""
    HIT = "hit"
    MISS = "miss"
    ALREADY_COMPLETE = "already_complete"  # Game was terminal, nothing changed
    INVALID_CELL = "invalid_cell"  # Cell index off the board, nothing changed

    def __str__(self) -> str:
        return self.value


class GameResult(Enum):
    """Possible game outcomes from the attacking player's perspective."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"
    FINISHED = "finished"  # Complete, but the attempts that decided it are not known

    def __str__(self) -> str:
        return self.value.replace("_", " ").title()


class GamePhase(Enum):
    """
    Phases of a single game.

    PLACING -> ATTACKING -> {WON, LOST}. FINISHED is entered directly when a
    game that is already complete is received over the transport.
    """
    PLACING = "placing"
    ATTACKING = "attacking"
    WON = "won"
    LOST = "lost"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST, GamePhase.FINISHED)


class EventType(Enum):
    """Events published by a game session to its listeners."""
    SHIPS_PLACED = "ships_placed"
    ATTEMPT = "attempt"
    GAME_WON = "game_won"
    GAME_LOST = "game_lost"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# RULES
# ============================================================================

@dataclass(frozen=True)
class GameRules:
    """
    Tunable rules of a game.

    Attributes:
        cell_count: Number of cells on the board
        total_ship_count: Ships the placing player must hide
        incorrect_attempts_allowed: Misses after which the attacker loses
    """
    cell_count: int = CELL_COUNT
    total_ship_count: int = TOTAL_SHIP_COUNT
    incorrect_attempts_allowed: int = INCORRECT_ATTEMPTS_ALLOWED

    def __post_init__(self):
        if self.cell_count <= 0:
            raise ValueError(f"cell_count must be positive: {self.cell_count}")
        if not 0 < self.total_ship_count <= self.cell_count:
            raise ValueError(
                f"total_ship_count must be in 1..{self.cell_count}: {self.total_ship_count}"
            )
        if self.incorrect_attempts_allowed <= 0:
            raise ValueError(
                f"incorrect_attempts_allowed must be positive: {self.incorrect_attempts_allowed}"
            )

    def in_bounds(self, cell_index: Any) -> bool:
        """Check whether a cell index lies on the board."""
        return (
            isinstance(cell_index, int)
            and not isinstance(cell_index, bool)
            and 0 <= cell_index < self.cell_count
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cell_count": self.cell_count,
            "total_ship_count": self.total_ship_count,
            "incorrect_attempts_allowed": self.incorrect_attempts_allowed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameRules":
        return cls(
            cell_count=int(data.get("cell_count", CELL_COUNT)),
            total_ship_count=int(data.get("total_ship_count", TOTAL_SHIP_COUNT)),
            incorrect_attempts_allowed=int(
                data.get("incorrect_attempts_allowed", INCORRECT_ATTEMPTS_ALLOWED)
            ),
        )


DEFAULT_RULES = GameRules()
