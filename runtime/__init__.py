"""
Match orchestration for Message Battleship.

This module provides:
- Conversation / Message: In-memory message transport
- MatchRunner: Plays two agents against each other through the transport
"""

from .transport import Conversation, Message, completed_caption, placed_caption
from .runner import MatchResult, MatchRunner

__all__ = [
    "Conversation",
    "Message",
    "completed_caption",
    "placed_caption",
    "MatchResult",
    "MatchRunner",
]
