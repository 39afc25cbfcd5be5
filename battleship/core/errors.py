"""
Exceptions raised by the Message Battleship engine.

Out-of-range cells and attempts on a finished game are reported through
AttemptOutcome values instead; the exceptions here cover failures the
caller has to deal with.
"""

from __future__ import annotations


class BattleshipError(Exception):
    """Base class for all engine errors."""


class MalformedState(BattleshipError, ValueError):
    """An encoded game could not be decoded (missing or invalid fields)."""

    def __init__(self, message: str, encoded: str | None = None):
        super().__init__(message)
        self.encoded = encoded


class InvalidPlacement(BattleshipError, ValueError):
    """Ship locations do not satisfy the rules (count, range, duplicates)."""


class PhaseError(BattleshipError, RuntimeError):
    """An operation was requested in a phase that does not allow it."""


class AlreadyComplete(BattleshipError, RuntimeError):
    """An attempt was made after the game reached a terminal state."""
