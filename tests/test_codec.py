from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from itertools import combinations
from urllib.parse import parse_qsl, urlsplit

import pytest

from battleship import GameState, MalformedState, StateCodec, decode, encode


@pytest.mark.parametrize("complete", [False, True])
def test_every_placement_survives_encoding(complete):
    for ships in combinations(range(9), 2):
        state = GameState(frozenset(ships), is_complete=complete)
        decoded = decode(encode(state))

        assert decoded == state
        assert decoded.ship_locations == frozenset(ships)
        assert decoded.is_complete is complete


def test_encoded_format():
    url = encode(GameState(frozenset({5, 2})))

    assert url == "www.shinobicontrols.com/battleship?Ship_Location=2&Ship_Location=5&Is_Complete=0"
    assert parse_qsl(urlsplit(url).query) == [
        ("Ship_Location", "2"),
        ("Ship_Location", "5"),
        ("Is_Complete", "0"),
    ]


def test_custom_base_url():
    codec = StateCodec(base_url="https://example.test/play")
    url = codec.encode(GameState(frozenset({0, 8}), is_complete=True))

    assert url.startswith("https://example.test/play?")
    assert url.endswith("Is_Complete=1")


def test_attempts_do_not_travel():
    state = GameState(frozenset({2, 5}), attempted_cells=[0, 2])

    decoded = decode(encode(state))

    assert decoded == state
    assert decoded.attempted_cells == []


def test_decode_query_only():
    state = decode("?Ship_Location=2&Ship_Location=5&Is_Complete=0")

    assert state.ship_locations == frozenset({2, 5})
    assert state.is_complete is False


def test_decode_is_order_independent():
    state = decode("?Is_Complete=1&Ship_Location=5&Ship_Location=2")

    assert state.ship_locations == frozenset({2, 5})
    assert state.is_complete is True


def test_decode_ignores_unknown_parameters():
    state = decode("www.shinobicontrols.com/battleship?Turn=4&Ship_Location=1&Ship_Location=7&Is_Complete=0&v=2")

    assert state.ship_locations == frozenset({1, 7})


def test_decode_without_ships_is_empty_not_error():
    # Kept permissive on purpose: no Ship_Location entries decode to no ships
    state = decode("?Is_Complete=1")

    assert state.ship_locations == frozenset()
    assert state.is_complete is True


@pytest.mark.parametrize(
    "url",
    [
        "?Ship_Location=2&Ship_Location=5",
        "?Ship_Location=two&Is_Complete=0",
        "?Ship_Location=&Is_Complete=0",
        "?Ship_Location=2.5&Is_Complete=0",
        "?Ship_Location=12&Is_Complete=0",
        "?Ship_Location=2&Is_Complete=yes",
        "www.shinobicontrols.com/battleship",
        "",
    ],
)
def test_decode_malformed(url):
    with pytest.raises(MalformedState):
        decode(url)


def test_decode_rejects_non_string():
    with pytest.raises(MalformedState):
        decode(None)


def test_malformed_state_is_value_error():
    with pytest.raises(ValueError) as excinfo:
        decode("?Ship_Location=x&Is_Complete=0")

    assert excinfo.value.encoded == "?Ship_Location=x&Is_Complete=0"


def test_first_completion_flag_wins():
    assert decode("?Ship_Location=1&Is_Complete=1&Is_Complete=0").is_complete is True
