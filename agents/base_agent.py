"""
Base agent interface for Message Battleship.

All automated players implement this interface so the match runner can
drive both sides of a game.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from battleship.board import PlacementBoard


class BaseAgent(ABC):
    """
    Abstract base class for all agents.

    An agent plays either side of a game: it hides ships when placing and
    picks cells when attacking.

    Subclasses must implement:
    - choose_placement(): Cells to select on the placement board
    - choose_attempt(): Next cell to attack

    Attributes:
        name: Agent name, used as the player name in message captions
    """

    def __init__(self, name: str = None):
        """
        Initialize the agent.

        Args:
            name: Optional name for the agent (defaults to class name)
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    def choose_placement(self, board: PlacementBoard) -> List[int]:
        """
        Pick the cells to hide ships in.

        Args:
            board: Empty placement board (read board.cell_count and
                   board.ships_left_to_place)

        Returns:
            Distinct cell indices, one per ship
        """
        pass

    @abstractmethod
    def choose_attempt(self, status: Dict[str, Any]) -> int:
        """
        Pick the next cell to attack.

        Status structure (GameSession.status()):
            {
                "phase": "attacking",
                "rules": {"cell_count": int, ...},
                "attempted_cells": [int, ...],
                "hits": int,
                "lives_remaining": int,
                ...
            }

        Args:
            status: Current view of the game being attacked

        Returns:
            Cell index not attempted before
        """
        pass

    def reset(self) -> None:
        """
        Return the agent to its initial state before a series of matches.

        Override if your agent keeps state across calls.
        """
        pass

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
