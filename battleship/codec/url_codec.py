"""
URL codec for handing a game over a message transport.

Wire format:
    <base>?Ship_Location=<int>&Ship_Location=<int>&...&Is_Complete=<0|1>

- One Ship_Location entry per ship, order-independent.
- Exactly one Is_Complete entry ("1" = complete, "0" = in progress).
- Unknown parameters are ignored when decoding.

Attempted cells do not travel: only ship locations and the completion flag
are encoded.
"""

from __future__ import annotations

import re
from typing import List, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from ..core.errors import MalformedState
from ..core.state import GameState
from ..core.types import DEFAULT_BASE_URL, DEFAULT_RULES, GameRules
from infra.logger import get_logger

log = get_logger(__name__)

SHIP_LOCATION_KEY = "Ship_Location"
IS_COMPLETE_KEY = "Is_Complete"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLAGS = {"1": True, "0": False}


class StateCodec:
    """
    Encodes GameStates to URL strings and back.

    Attributes:
        base_url: Prefix placed before the query string
        rules: Used to reject ship locations that are off the board
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, rules: GameRules = DEFAULT_RULES):
        self.base_url = base_url
        self.rules = rules

    def encode(self, state: GameState) -> str:
        """Serialize the ship locations and completion flag of a game."""
        items: List[Tuple[str, str]] = [
            (SHIP_LOCATION_KEY, str(location)) for location in sorted(state.ship_locations)
        ]
        items.append((IS_COMPLETE_KEY, "1" if state.is_complete else "0"))

        encoded = f"{self.base_url}?{urlencode(items)}"
        log.debug("Encoded %s as %s", state, encoded)
        return encoded

    def decode(self, encoded: str) -> GameState:
        """
        Parse a game from its URL form.

        A URL without Ship_Location entries decodes to a game with no ships.

        Raises:
            MalformedState: If a Ship_Location is not an on-board integer,
                or Is_Complete is missing or not "0"/"1"
        """
        if not isinstance(encoded, str):
            raise MalformedState(f"Encoded game must be a string, got {type(encoded).__name__}")

        query = urlsplit(encoded).query
        items = parse_qsl(query, keep_blank_values=True)

        locations = set()
        complete_values = []
        for key, value in items:
            if key == SHIP_LOCATION_KEY:
                locations.add(self._parse_location(value, encoded))
            elif key == IS_COMPLETE_KEY:
                complete_values.append(value)

        if not complete_values:
            raise MalformedState(f"Missing {IS_COMPLETE_KEY} in {encoded!r}", encoded)

        # First occurrence wins when the flag is repeated
        flag = complete_values[0]
        if flag not in _FLAGS:
            raise MalformedState(f"Invalid {IS_COMPLETE_KEY} value {flag!r}", encoded)

        state = GameState(ship_locations=frozenset(locations), is_complete=_FLAGS[flag])
        log.debug("Decoded %s from %s", state, encoded)
        return state

    def _parse_location(self, value: str, encoded: str) -> int:
        if not _INTEGER.fullmatch(value):
            raise MalformedState(f"Invalid {SHIP_LOCATION_KEY} value {value!r}", encoded)
        location = int(value)
        if not self.rules.in_bounds(location):
            raise MalformedState(f"{SHIP_LOCATION_KEY} {location} is off the board", encoded)
        return location


_default_codec = StateCodec()


def encode(state: GameState) -> str:
    """Encode with the default base URL."""
    return _default_codec.encode(state)


def decode(encoded: str) -> GameState:
    """Decode with the default rules."""
    return _default_codec.decode(encoded)
