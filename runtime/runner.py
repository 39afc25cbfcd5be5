from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from agents import BaseAgent
from battleship import GamePhase, GameResult, GameRules, GameSession, StateCodec, DEFAULT_RULES
from battleship.mechanics import AttemptResult

from infra.logger import get_logger
from .transport import Conversation, Message, completed_caption, placed_caption

log = get_logger(__name__)


@dataclass
class MatchResult:
    """
    Outcome of one simulated match.

    Attributes:
        session_id: Game identifier shared by both sides
        result: WON or LOST, from the attacker's perspective
        winner: Name of the winning agent
        ship_locations: Where the placer hid the ships
        attempts: Every attempt the attacker made, in order
        messages: Messages exchanged through the conversation
    """
    session_id: str
    result: GameResult
    winner: str
    ship_locations: List[int]
    attempts: List[AttemptResult] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)

    @property
    def total_attempts(self) -> int:
        return len(self.attempts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "result": self.result.value,
            "winner": self.winner,
            "ship_locations": list(self.ship_locations),
            "attempts": [a.to_dict() for a in self.attempts],
            "messages": [m.to_dict() for m in self.messages],
        }


class MatchRunner:
    """
    Plays a placer agent against an attacker agent through the message
    transport: the game only crosses from one side to the other as an
    encoded URL.
    """

    def __init__(
        self,
        placer: BaseAgent,
        attacker: BaseAgent,
        rules: GameRules = DEFAULT_RULES,
        codec: Optional[StateCodec] = None,
        conversation: Optional[Conversation] = None,
    ):
        self.placer = placer
        self.attacker = attacker
        self.rules = rules
        self.codec = codec or StateCodec(rules=rules)
        self.conversation = conversation if conversation is not None else Conversation()

        log.info("MatchRunner initialized: %s places, %s attacks", placer, attacker)

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def run(self) -> MatchResult:
        """Play one match from placement to a terminal state."""
        placing = self._place_ships()

        message = self.conversation.selected_message
        attacking = GameSession.from_url(
            message.url,
            self.rules,
            codec=self.codec,
            session_id=message.session_id,
        )
        if attacking.phase != GamePhase.ATTACKING:
            raise RuntimeError(f"Received game is not playable (phase {attacking.phase})")

        attempts = self._attack(attacking)
        won = attacking.phase == GamePhase.WON

        self.conversation.insert(Message(
            url=attacking.encode(),
            caption=completed_caption(self.attacker.name, won),
            sender=self.attacker.name,
            session_id=attacking.session_id,
        ))

        result = MatchResult(
            session_id=attacking.session_id,
            result=attacking.result,
            winner=self.attacker.name if won else self.placer.name,
            ship_locations=sorted(placing.state.ship_locations),
            attempts=attempts,
            messages=self.conversation.for_session(attacking.session_id),
        )
        log.info(
            "Match %s: %s after %d attempts, winner %s",
            result.session_id, result.result, result.total_attempts, result.winner,
        )
        return result

    def run_many(self, num_matches: int) -> List[MatchResult]:
        """Play several matches; agents are reset once, before the first."""
        self.placer.reset()
        self.attacker.reset()
        results = []
        for _ in range(num_matches):
            results.append(self.run())
        return results

    # ------------------------------------------------------------------#
    # Helpers
    # ------------------------------------------------------------------#
    def _place_ships(self) -> GameSession:
        session = GameSession.new(self.rules, codec=self.codec)
        for cell in self.placer.choose_placement(session.board):
            session.toggle(cell)
        session.finish_placement()

        self.conversation.insert(Message(
            url=session.encode(),
            caption=placed_caption(self.placer.name),
            sender=self.placer.name,
            session_id=session.session_id,
        ))
        return session

    def _attack(self, session: GameSession) -> List[AttemptResult]:
        attempts: List[AttemptResult] = []
        # Each new attempt uses up a cell, so a game ends within cell_count attempts
        for _ in range(self.rules.cell_count):
            if session.is_game_over:
                break
            cell = self.attacker.choose_attempt(session.status())
            result = session.attempt(cell)
            if not result.accepted or result.duplicate:
                raise RuntimeError(f"{self.attacker} made an unusable attempt: {result.outcome} on {cell!r}")
            attempts.append(result)

        if not session.is_game_over:
            raise RuntimeError("Match did not finish")
        return attempts
