"""HTTP API entrypoint for driving games from a presentation layer."""

from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from battleship import (
    AttemptOutcome,
    GamePhase,
    GameSession,
    GameState,
    InvalidPlacement,
    MalformedState,
)
from infra.logger import configure_from_settings, get_logger
from infra.settings import load_settings
from runtime.transport import completed_caption, placed_caption

# Configure logging before any request is served.
settings = load_settings()
configure_from_settings(settings)
log = get_logger(__name__)

rules = settings.rules()
codec = settings.codec()

app = FastAPI(title="Message Battleship")
sessions: Dict[str, GameSession] = {}
players: Dict[str, str] = {}


# Allow browser-based clients served from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class PlaceRequest(BaseModel):
    player: str = "Player"
    ship_locations: List[int]


class OpenRequest(BaseModel):
    url: str
    player: str = "Player"


class AttemptRequest(BaseModel):
    cell: int


def _get_session(session_id: str) -> GameSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(404, f"Unknown game {session_id}")
    return session


@app.get("/rules")
def get_rules():
    return {**rules.to_dict(), "base_url": codec.base_url}


@app.post("/games")
def place(request: PlaceRequest):
    """Hide ships and return the message to send to the other player."""
    try:
        state = GameState.create(request.ship_locations, rules)
    except InvalidPlacement as exc:
        raise HTTPException(400, str(exc)) from exc

    url = codec.encode(state)
    log.info("%s placed %d ships", request.player, len(state.ship_locations))
    return {"url": url, "caption": placed_caption(request.player)}


@app.post("/games/open")
def open_game(request: OpenRequest):
    """Receive a game from the other player and start attacking it."""
    try:
        session = GameSession.from_url(request.url, rules, codec=codec)
    except MalformedState as exc:
        raise HTTPException(400, str(exc)) from exc

    sessions[session.session_id] = session
    players[session.session_id] = request.player
    return session.status()


@app.get("/games/{session_id}")
def status(session_id: str):
    return _get_session(session_id).status()


@app.post("/games/{session_id}/attempts")
def attempt(session_id: str, request: AttemptRequest):
    session = _get_session(session_id)
    result = session.attempt(request.cell)

    if result.outcome == AttemptOutcome.ALREADY_COMPLETE:
        raise HTTPException(409, "Game is already complete")

    response = {"attempt": result.to_dict(), "status": session.status()}
    if result.completed_game:
        player = players.get(session_id, "Player")
        response["message"] = {
            "url": session.encode(),
            "caption": completed_caption(player, session.phase == GamePhase.WON),
        }
    return response


@app.delete("/games/{session_id}")
def close(session_id: str):
    _get_session(session_id)
    del sessions[session_id]
    players.pop(session_id, None)
    return {"success": True}
