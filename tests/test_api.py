from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient

from api.app import app

client = TestClient(app)


def place(ships, player="alice"):
    response = client.post("/games", json={"player": player, "ship_locations": ships})
    assert response.status_code == 200
    return response.json()


def open_game(url, player="bob"):
    response = client.post("/games/open", json={"url": url, "player": player})
    assert response.status_code == 200
    return response.json()


def test_rules():
    body = client.get("/rules").json()

    assert body["cell_count"] == 9
    assert body["total_ship_count"] >= 1
    assert "base_url" in body


def test_place_returns_message():
    body = place([2, 5])

    assert body["url"].endswith("?Ship_Location=2&Ship_Location=5&Is_Complete=0")
    assert body["caption"] == "$alice placed their ships! Can you find them?"


def test_place_rejects_bad_ships():
    response = client.post("/games", json={"ship_locations": [2, 2]})

    assert response.status_code == 400


def test_full_game_over_http():
    url = place([2, 5])["url"]
    status = open_game(url)
    session_id = status["session_id"]
    assert status["phase"] == "attacking"

    first = client.post(f"/games/{session_id}/attempts", json={"cell": 2}).json()
    assert first["attempt"]["outcome"] == "hit"
    assert "message" not in first

    last = client.post(f"/games/{session_id}/attempts", json={"cell": 5}).json()
    assert last["status"]["phase"] == "won"
    assert last["message"]["caption"] == "$bob destroyed all the ships!"
    assert last["message"]["url"].endswith("Is_Complete=1")

    response = client.post(f"/games/{session_id}/attempts", json={"cell": 0})
    assert response.status_code == 409

    assert client.get(f"/games/{session_id}").json()["attempted_cells"] == [2, 5]


def test_lost_game_caption():
    session_id = open_game(place([2, 5])["url"])["session_id"]

    for cell in (0, 1):
        client.post(f"/games/{session_id}/attempts", json={"cell": cell})
    last = client.post(f"/games/{session_id}/attempts", json={"cell": 3}).json()

    assert last["status"]["phase"] == "lost"
    assert last["message"]["caption"] == "$bob lost!"


def test_invalid_cell_is_reported_not_failed():
    session_id = open_game(place([2, 5])["url"])["session_id"]

    body = client.post(f"/games/{session_id}/attempts", json={"cell": 11}).json()

    assert body["attempt"]["outcome"] == "invalid_cell"
    assert body["status"]["attempted_cells"] == []


def test_open_malformed_url():
    response = client.post("/games/open", json={"url": "?Ship_Location=two&Is_Complete=0"})

    assert response.status_code == 400


def test_unknown_game():
    assert client.get("/games/missing").status_code == 404
    assert client.post("/games/missing/attempts", json={"cell": 0}).status_code == 404


def test_close_game():
    session_id = open_game(place([0, 8])["url"])["session_id"]

    assert client.delete(f"/games/{session_id}").json() == {"success": True}
    assert client.get(f"/games/{session_id}").status_code == 404
