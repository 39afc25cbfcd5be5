"""
Events published by a GameSession.

Listeners are plain callables invoked synchronously, in subscription order,
right after the state change they describe.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .core.types import EventType


@dataclass(frozen=True)
class GameEvent:
    """
    One state change of a game.

    Attributes:
        type: What happened
        session_id: Session that published the event
        data: Event payload (cell, outcome, ship count, ...)
    """
    type: EventType
    session_id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "session_id": self.session_id,
            **self.data,
        }


GameListener = Callable[[GameEvent], None]


class EventBus:
    """Synchronous observer list."""

    def __init__(self):
        self._listeners: List[GameListener] = []

    def subscribe(self, listener: GameListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: GameEvent) -> None:
        # Listener errors propagate to whoever triggered the event
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
