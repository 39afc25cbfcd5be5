"""
GameState - the state that travels between the two players.

A GameState is created once by the placing player, handed over the
transport, mutated attempt by attempt by the attacking player, and frozen
once the game is complete.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List

from .errors import AlreadyComplete, InvalidPlacement
from .types import DEFAULT_RULES, GameRules


@dataclass
class GameState:
    """
    Ship locations, attempts made against them, and the completion flag.

    Equality only looks at the fields carried on the wire (ship locations
    and completion), so a state compares equal to its decoded copy.

    Attributes:
        ship_locations: Cells holding a ship, never changed after creation
        is_complete: True once the game was won or lost
        attempted_cells: Cells attacked so far, in order, without duplicates
    """
    ship_locations: FrozenSet[int]
    is_complete: bool = False
    attempted_cells: List[int] = field(default_factory=list, compare=False)

    def __post_init__(self):
        self.ship_locations = frozenset(self.ship_locations)
        self.attempted_cells = list(self.attempted_cells)

    @classmethod
    def create(
        cls,
        ship_locations: Iterable[int],
        rules: GameRules = DEFAULT_RULES,
    ) -> "GameState":
        """
        Create a fresh game from the placing player's selection.

        Raises:
            InvalidPlacement: If the locations are off the board, repeated,
                or not exactly rules.total_ship_count of them
        """
        locations = list(ship_locations)
        for cell in locations:
            if not rules.in_bounds(cell):
                raise InvalidPlacement(f"Ship location out of bounds: {cell!r}")
        if len(set(locations)) != len(locations):
            raise InvalidPlacement(f"Duplicate ship locations: {sorted(locations)}")
        if len(locations) != rules.total_ship_count:
            raise InvalidPlacement(
                f"Expected {rules.total_ship_count} ships, got {len(locations)}"
            )
        return cls(ship_locations=frozenset(locations))

    # ========================================================================
    # MUTATION
    # ========================================================================

    def record_attempt(self, cell_index: int) -> bool:
        """
        Append an attempted cell.

        Returns:
            True if the cell was new, False if it had been attempted before

        Raises:
            AlreadyComplete: If the game is already terminal
        """
        if self.is_complete:
            raise AlreadyComplete("Game is already complete")
        if cell_index in self.attempted_cells:
            return False
        self.attempted_cells.append(cell_index)
        return True

    def mark_complete(self) -> None:
        self.is_complete = True

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def hit_cells(self) -> List[int]:
        return [c for c in self.attempted_cells if c in self.ship_locations]

    @property
    def missed_cells(self) -> List[int]:
        return [c for c in self.attempted_cells if c not in self.ship_locations]

    def copy(self) -> "GameState":
        return GameState(
            ship_locations=self.ship_locations,
            is_complete=self.is_complete,
            attempted_cells=list(self.attempted_cells),
        )

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain, JSON-friendly dict."""
        return {
            "ship_locations": sorted(self.ship_locations),
            "attempted_cells": list(self.attempted_cells),
            "is_complete": self.is_complete,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        return cls(
            ship_locations=frozenset(int(c) for c in data.get("ship_locations", [])),
            is_complete=bool(data.get("is_complete", False)),
            attempted_cells=[int(c) for c in data.get("attempted_cells", [])],
        )

    def __str__(self) -> str:
        status = "complete" if self.is_complete else "in progress"
        return (
            f"GameState(ships={sorted(self.ship_locations)}, "
            f"attempts={self.attempted_cells}, {status})"
        )
