"""
In-memory message transport.

Stands in for the conversation a game is played through: each message
carries the encoded game URL and a caption, and the receiving side picks
up the selected (latest) message to continue the game.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from infra.logger import get_logger

log = get_logger(__name__)


def placed_caption(player: str) -> str:
    return f"${player} placed their ships! Can you find them?"


def completed_caption(player: str, won: bool) -> str:
    return f"${player} destroyed all the ships!" if won else f"${player} lost!"


@dataclass(frozen=True)
class Message:
    """
    One message in a conversation.

    Attributes:
        url: Encoded game state
        caption: Text shown with the message
        sender: Player who sent it
        session_id: Game the message belongs to
    """
    url: str
    caption: str
    sender: str
    session_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "caption": self.caption,
            "sender": self.sender,
            "session_id": self.session_id,
        }


class Conversation:
    """
    Ordered list of messages between two players.

    No delivery guarantees are modelled: inserted messages are immediately
    visible to the other side.
    """

    def __init__(self):
        self._messages: List[Message] = []
        self._selected: Optional[int] = None

    def insert(self, message: Message) -> None:
        """Append a message and select it."""
        self._messages.append(message)
        self._selected = len(self._messages) - 1
        log.info("%s: %s", message.sender, message.caption)

    def select(self, index: int) -> Message:
        """
        Select an earlier message.

        Raises:
            IndexError: If there is no message at index
        """
        message = self._messages[index]
        self._selected = index % len(self._messages)
        return message

    @property
    def selected_message(self) -> Optional[Message]:
        if self._selected is None:
            return None
        return self._messages[self._selected]

    @property
    def messages(self) -> List[Message]:
        return self._messages.copy()

    def for_session(self, session_id: str) -> List[Message]:
        return [m for m in self._messages if m.session_id == session_id]

    def __len__(self) -> int:
        return len(self._messages)
