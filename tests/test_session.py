from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from battleship import (
    AttemptOutcome,
    GamePhase,
    GameResult,
    GameSession,
    GameState,
    InvalidPlacement,
    MalformedState,
    PhaseError,
)
from battleship.core.types import EventType


def placed_session(*ships):
    session = GameSession.new()
    for cell in ships:
        session.toggle(cell)
    session.finish_placement()
    return session


def test_placement_moves_to_attacking():
    session = GameSession.new()
    assert session.phase == GamePhase.PLACING
    assert session.status()["ships_left_to_place"] == 2

    session.toggle(2)
    session.toggle(5)
    state = session.finish_placement()

    assert session.phase == GamePhase.ATTACKING
    assert state.ship_locations == frozenset({2, 5})
    # Board is blank again so a snapshot gives nothing away
    assert session.board.selected_cells == []


def test_finish_placement_needs_all_ships():
    session = GameSession.new()
    session.toggle(2)

    with pytest.raises(InvalidPlacement):
        session.finish_placement()
    assert session.phase == GamePhase.PLACING


def test_no_toggling_after_placement():
    session = placed_session(2, 5)

    with pytest.raises(PhaseError):
        session.toggle(1)
    with pytest.raises(PhaseError):
        session.finish_placement()


def test_no_attempts_or_encoding_while_placing():
    session = GameSession.new()

    with pytest.raises(PhaseError):
        session.attempt(0)
    with pytest.raises(PhaseError):
        session.encode()


def test_hand_off_through_url():
    placer = placed_session(2, 5)
    url = placer.encode()

    attacker = GameSession.from_url(url, session_id=placer.session_id)

    assert attacker.phase == GamePhase.ATTACKING
    assert attacker.session_id == placer.session_id
    assert attacker.state == placer.state


def test_from_url_malformed():
    with pytest.raises(MalformedState):
        GameSession.from_url("?Ship_Location=2")


def test_received_finished_game_refuses_attempts():
    session = GameSession.from_url("?Ship_Location=2&Ship_Location=5&Is_Complete=1")

    assert session.phase == GamePhase.FINISHED
    assert session.result == GameResult.FINISHED
    assert session.is_game_over
    assert session.attempt(0).outcome == AttemptOutcome.ALREADY_COMPLETE
    assert session.state.attempted_cells == []


def test_received_game_without_ships_is_finished():
    session = GameSession.from_url("?Is_Complete=1")

    assert session.phase == GamePhase.FINISHED
    assert session.result == GameResult.FINISHED
    assert session.attempt(4).outcome == AttemptOutcome.ALREADY_COMPLETE


def test_resumed_complete_state_keeps_its_outcome():
    state = GameState.create([2, 5])
    state.record_attempt(2)
    state.record_attempt(5)
    state.mark_complete()

    assert GameSession.from_state(state).phase == GamePhase.WON


def test_win_publishes_events_in_order():
    session = GameSession.from_state(GameState.create([2, 5]))
    events = []
    session.subscribe(events.append)

    for cell in (0, 2, 5):
        session.attempt(cell)

    assert [e.type for e in events] == [
        EventType.ATTEMPT,
        EventType.ATTEMPT,
        EventType.ATTEMPT,
        EventType.GAME_WON,
    ]
    assert events[0].data["outcome"] == "miss"
    assert events[1].to_dict()["cell"] == 2
    assert session.phase == GamePhase.WON
    assert session.result == GameResult.WON


def test_loss_sets_phase_and_event():
    session = GameSession.from_state(GameState.create([2, 5]))
    events = []
    session.subscribe(events.append)

    for cell in (0, 1, 3):
        session.attempt(cell)

    assert session.phase == GamePhase.LOST
    assert events[-1].type == EventType.GAME_LOST
    assert session.encode().endswith("Is_Complete=1")


def test_ships_placed_event():
    session = GameSession.new()
    events = []
    session.subscribe(events.append)
    session.toggle(0)
    session.toggle(8)
    session.finish_placement()

    assert len(events) == 1
    assert events[0].type == EventType.SHIPS_PLACED
    assert events[0].data == {"ship_count": 2}


def test_invalid_cell_publishes_nothing():
    session = GameSession.from_state(GameState.create([2, 5]))
    events = []
    session.subscribe(events.append)

    result = session.attempt(42)

    assert result.outcome == AttemptOutcome.INVALID_CELL
    assert events == []


def test_unsubscribe():
    session = GameSession.from_state(GameState.create([2, 5]))
    events = []
    unsubscribe = session.subscribe(events.append)
    unsubscribe()

    session.attempt(0)

    assert events == []


def test_listener_errors_propagate():
    session = GameSession.from_state(GameState.create([2, 5]))

    def broken(event):
        raise RuntimeError("listener failed")

    session.subscribe(broken)

    with pytest.raises(RuntimeError):
        session.attempt(0)


def test_status_counters():
    session = GameSession.from_state(GameState.create([2, 5]))
    session.attempt(2)
    session.attempt(4)

    status = session.status()

    assert status["phase"] == "attacking"
    assert status["result"] == "in_progress"
    assert status["attempted_cells"] == [2, 4]
    assert status["hits"] == 1
    assert status["ships_remaining"] == 1
    assert status["lives_remaining"] == 2
    assert status["is_complete"] is False
