"""
Random agent implementation for testing and simulated matches.
"""

import random
from typing import Any, Dict, List, Optional

from battleship.board import PlacementBoard
from .base_agent import BaseAgent
from .registry import register_agent


@register_agent("random")
class RandomAgent(BaseAgent):
    """
    Agent that hides ships and attacks cells uniformly at random.

    Never attacks the same cell twice.
    """

    def __init__(self, name: str = None, seed: Optional[int] = None, **_: Any):
        """
        Initialize random agent.

        Args:
            name: Agent name (default: "RandomAgent")
            seed: Random seed for reproducibility (None = random)
        """
        super().__init__(name)
        self.seed = seed
        self.rng = random.Random(seed)

    def choose_placement(self, board: PlacementBoard) -> List[int]:
        return sorted(self.rng.sample(range(board.cell_count), board.ships_left_to_place))

    def choose_attempt(self, status: Dict[str, Any]) -> int:
        cell_count = status["rules"]["cell_count"]
        attempted = set(status.get("attempted_cells", []))
        untried = [cell for cell in range(cell_count) if cell not in attempted]
        if not untried:
            raise RuntimeError("No cells left to attempt")
        return self.rng.choice(untried)

    def reset(self) -> None:
        self.rng = random.Random(self.seed)
