"""
Board selection state for the Message Battleship engine.

This module provides:
- BoardState: Per-cell selection with toggle/reset
- PlacementBoard: Selection limited to the number of ships to place
- BoardSnapshot: Immutable, blind view of a board
"""

from .board import BoardSnapshot, BoardState, PlacementBoard

__all__ = [
    "BoardSnapshot",
    "BoardState",
    "PlacementBoard",
]
