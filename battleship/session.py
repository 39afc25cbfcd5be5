"""
GameSession - Main game interface.

This is the primary API of the engine. A session owns one GameState and
walks it through the game phases:

    PLACING -> ATTACKING -> {WON, LOST}

Usage:
    from battleship import GameSession

    placer = GameSession.new()
    placer.toggle(2)
    placer.toggle(5)
    placer.finish_placement()
    url = placer.encode()          # hand this to the transport

    attacker = GameSession.from_url(url)
    result = attacker.attempt(2)   # AttemptOutcome.HIT
    print(attacker.status())
"""

from __future__ import annotations

import uuid
from typing import Any, Callable, Dict, Optional

from .board import PlacementBoard
from .codec import StateCodec
from .core.errors import PhaseError
from .core.state import GameState
from .core.types import DEFAULT_RULES, EventType, GamePhase, GameResult, GameRules
from .events import EventBus, GameEvent, GameListener
from .mechanics import AttemptResult, TurnEvaluator
from infra.logger import get_logger

log = get_logger(__name__)

_PHASE_FOR_RESULT = {
    GameResult.WON: GamePhase.WON,
    GameResult.LOST: GamePhase.LOST,
}


class GameSession:
    """
    One game as seen by whichever player currently holds it.

    The session manages:
    - Ship placement on a PlacementBoard
    - Attempts through the TurnEvaluator
    - Phase transitions
    - Event notification to subscribed listeners

    Attributes:
        session_id: Identifier shared by the placing and attacking side
        rules: Rules of this game
        phase: Current GamePhase
        state: The GameState (None until ships are placed)
    """

    def __init__(
        self,
        rules: GameRules = DEFAULT_RULES,
        codec: Optional[StateCodec] = None,
        session_id: Optional[str] = None,
    ):
        """
        Initialize a session in the PLACING phase.

        Args:
            rules: Rules of the game
            codec: Codec for the hand-off (defaults to one built from rules)
            session_id: Identifier to reuse (a new one is generated if None)
        """
        self.session_id = session_id or uuid.uuid4().hex
        self.rules = rules
        self.codec = codec or StateCodec(rules=rules)

        self.board = PlacementBoard(rules)
        self.state: Optional[GameState] = None
        self.phase = GamePhase.PLACING

        self._evaluator = TurnEvaluator(rules)
        self._events = EventBus()

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def new(cls, rules: GameRules = DEFAULT_RULES, **kwargs: Any) -> "GameSession":
        """Start a game on the placing side."""
        return cls(rules, **kwargs)

    @classmethod
    def from_state(cls, state: GameState, rules: GameRules = DEFAULT_RULES, **kwargs: Any) -> "GameSession":
        """Resume a game on the attacking side from a received state."""
        session = cls(rules, **kwargs)
        session.state = state
        session.phase = session._phase_for_received(state)
        log.info("Session %s resumed in phase %s", session.session_id, session.phase)
        return session

    @classmethod
    def from_url(cls, url: str, rules: GameRules = DEFAULT_RULES, **kwargs: Any) -> "GameSession":
        """
        Resume a game from its encoded URL.

        Raises:
            MalformedState: If the URL cannot be decoded
        """
        codec = kwargs.pop("codec", None) or StateCodec(rules=rules)
        return cls.from_state(codec.decode(url), rules, codec=codec, **kwargs)

    def _phase_for_received(self, state: GameState) -> GamePhase:
        if not state.is_complete:
            return GamePhase.ATTACKING
        # Attempts do not travel on the wire, so the outcome of a bare received game is unknown
        if not state.attempted_cells:
            return GamePhase.FINISHED
        return _PHASE_FOR_RESULT.get(self._evaluator.result(state), GamePhase.FINISHED)

    # ========================================================================
    # EVENTS
    # ========================================================================

    def subscribe(self, listener: GameListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        return self._events.subscribe(listener)

    def _publish(self, event_type: EventType, **data: Any) -> None:
        self._events.publish(GameEvent(event_type, self.session_id, data))

    # ========================================================================
    # PLACEMENT
    # ========================================================================

    def toggle(self, cell_index: int) -> bool:
        """
        Toggle a ship on the placement board.

        Raises:
            PhaseError: If placement is over
        """
        self._require_phase(GamePhase.PLACING, "toggle ships")
        return self.board.toggle(cell_index)

    def finish_placement(self) -> GameState:
        """
        Lock in the placed ships and move to the ATTACKING phase.

        Raises:
            PhaseError: If placement is already over
            InvalidPlacement: If not all ships are placed
        """
        self._require_phase(GamePhase.PLACING, "finish placement")
        self.state = self.board.finish()
        self.phase = GamePhase.ATTACKING

        log.info("Session %s: %d ships placed", self.session_id, len(self.state.ship_locations))
        self._publish(EventType.SHIPS_PLACED, ship_count=len(self.state.ship_locations))
        return self.state

    # ========================================================================
    # ATTACK
    # ========================================================================

    def attempt(self, cell_index: int) -> AttemptResult:
        """
        Attack a cell.

        Raises:
            PhaseError: If ships have not been placed yet
        """
        if self.state is None:
            raise PhaseError(f"Cannot attack in phase {self.phase}")

        result = self._evaluator.attempt(cell_index, self.state)
        if not result.accepted:
            return result

        self._publish(
            EventType.ATTEMPT,
            cell=cell_index,
            outcome=result.outcome.value,
            duplicate=result.duplicate,
        )

        if result.completed_game:
            self.phase = _PHASE_FOR_RESULT[result.victory.result]
            log.info("Session %s finished: %s", self.session_id, result.victory)
            event_type = EventType.GAME_WON if self.phase == GamePhase.WON else EventType.GAME_LOST
            self._publish(event_type, reason=result.victory.reason)

        return result

    # ========================================================================
    # HAND-OFF AND STATUS
    # ========================================================================

    def encode(self) -> str:
        """
        Encode the game for the transport.

        Raises:
            PhaseError: If ships have not been placed yet
        """
        if self.state is None:
            raise PhaseError("Nothing to encode before ships are placed")
        return self.codec.encode(self.state)

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def result(self) -> GameResult:
        if self.phase == GamePhase.WON:
            return GameResult.WON
        if self.phase == GamePhase.LOST:
            return GameResult.LOST
        if self.phase == GamePhase.FINISHED:
            return GameResult.FINISHED
        return GameResult.IN_PROGRESS

    def status(self) -> Dict[str, Any]:
        """Summary for a presentation layer."""
        status: Dict[str, Any] = {
            "session_id": self.session_id,
            "phase": self.phase.value,
            "result": self.result.value,
            "rules": self.rules.to_dict(),
        }
        if self.state is None:
            status["ships_left_to_place"] = self.board.ships_left_to_place
            status["selected_cells"] = self.board.selected_cells
            return status

        status.update({
            "attempted_cells": list(self.state.attempted_cells),
            "hits": self._evaluator.hits_count(self.state),
            "ships_remaining": self._evaluator.ships_remaining(self.state),
            "lives_remaining": self._evaluator.lives_remaining(self.state),
            "is_complete": self.state.is_complete,
        })
        return status

    def _require_phase(self, phase: GamePhase, action: str) -> None:
        if self.phase != phase:
            raise PhaseError(f"Cannot {action} in phase {self.phase}")

    def __repr__(self) -> str:
        return f"GameSession(id={self.session_id!r}, phase={self.phase.value})"
