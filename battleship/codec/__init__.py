"""
Wire codec for passing games through a message transport.
"""

from .url_codec import (
    IS_COMPLETE_KEY,
    SHIP_LOCATION_KEY,
    StateCodec,
    decode,
    encode,
)

__all__ = [
    "IS_COMPLETE_KEY",
    "SHIP_LOCATION_KEY",
    "StateCodec",
    "decode",
    "encode",
]
