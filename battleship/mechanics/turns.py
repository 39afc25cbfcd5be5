"""
Turn evaluation for the Message Battleship engine.

The TurnEvaluator classifies one attack attempt against a GameState,
records it, and marks the state complete when a victory condition is met.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.state import GameState
from ..core.types import AttemptOutcome, DEFAULT_RULES, GameResult, GameRules
from .victory import VictoryConditions, VictoryResult
from infra.logger import get_logger

log = get_logger(__name__)


@dataclass
class AttemptResult:
    """
    Structured result of one attempt.

    Attributes:
        cell: The attempted cell index
        outcome: HIT, MISS, ALREADY_COMPLETE or INVALID_CELL
        duplicate: True if the cell had been attempted before (nothing recorded)
        victory: Game outcome after the attempt
    """
    cell: Any
    outcome: AttemptOutcome
    duplicate: bool = False
    victory: VictoryResult = field(
        default_factory=lambda: VictoryResult(GameResult.IN_PROGRESS, "Game ongoing")
    )

    @property
    def accepted(self) -> bool:
        """True if the attempt was evaluated against the ships."""
        return self.outcome in (AttemptOutcome.HIT, AttemptOutcome.MISS)

    @property
    def completed_game(self) -> bool:
        """True if this attempt is the one that ended the game."""
        return self.accepted and not self.duplicate and self.victory.is_game_over

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cell": self.cell,
            "outcome": self.outcome.value,
            "duplicate": self.duplicate,
            "victory": self.victory.to_dict(),
        }


class TurnEvaluator:
    """
    Classifies attempts and decides when a game is over.

    The evaluator holds only the rules; all game data lives in the
    GameState passed to each call.
    """

    def __init__(self, rules: GameRules = DEFAULT_RULES):
        self.rules = rules
        self._victory = VictoryConditions(rules)

    def attempt(self, cell_index: int, state: GameState) -> AttemptResult:
        """
        Attack a cell.

        The state is left untouched when it is already complete or when the
        cell is off the board. Re-attempting a cell returns the same
        classification without recording it twice.

        Args:
            cell_index: Cell to attack
            state: Game being played (mutated in place)

        Returns:
            AttemptResult describing the attempt
        """
        if state.is_complete:
            return AttemptResult(
                cell=cell_index,
                outcome=AttemptOutcome.ALREADY_COMPLETE,
                victory=self._victory.check_all(state),
            )

        if not self.rules.in_bounds(cell_index):
            log.debug("Rejected attempt on out-of-range cell %r", cell_index)
            return AttemptResult(cell=cell_index, outcome=AttemptOutcome.INVALID_CELL)

        is_new = state.record_attempt(cell_index)
        outcome = AttemptOutcome.HIT if cell_index in state.ship_locations else AttemptOutcome.MISS

        victory = self._victory.check_all(state)
        if victory.is_game_over:
            state.mark_complete()

        log.debug(
            "Attempt on cell %d: %s%s (%s)",
            cell_index, outcome, "" if is_new else " [duplicate]", victory,
        )
        return AttemptResult(
            cell=cell_index,
            outcome=outcome,
            duplicate=not is_new,
            victory=victory,
        )

    def is_win(self, state: GameState) -> bool:
        return self._victory.check_all_ships_hit(state).is_game_over

    def is_loss(self, state: GameState) -> bool:
        return self._victory.check_miss_limit(state).is_game_over

    def result(self, state: GameState) -> GameResult:
        """Outcome of the game; win takes priority over loss."""
        return self._victory.check_all(state).result

    # ========================================================================
    # COUNTERS
    # ========================================================================

    def hits_count(self, state: GameState) -> int:
        return len(state.hit_cells)

    def misses_count(self, state: GameState) -> int:
        return len(state.missed_cells)

    def lives_remaining(self, state: GameState) -> int:
        return max(0, self.rules.incorrect_attempts_allowed - self.misses_count(state))

    def ships_remaining(self, state: GameState) -> int:
        return len(state.ship_locations) - self.hits_count(state)
