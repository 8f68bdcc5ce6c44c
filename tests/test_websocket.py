"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from classic_snake.server.app import create_app


@pytest.fixture()
def tc():
    """Starlette TestClient run as a context manager so the lifespan-managed
    session manager and every WebSocket share one event loop."""
    with TestClient(create_app()) as client:
        yield client


def _create_session(tc, **body) -> str:
    resp = tc.post("/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestPlayWebSocket:
    def test_connect_and_receive_initial_state(self, tc):
        session_id = _create_session(tc, seed=1)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["status"] == "idle"
            assert state["snake"] == [[10, 10], [10, 9], [10, 8]]
            assert set(state) == {
                "snake", "food", "direction", "speed", "score", "status", "mode",
            }

    def test_start_streams_ticks(self, tc):
        session_id = _create_session(tc, initial_speed=50)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            started = json.loads(ws.receive_text())
            assert started["status"] == "running"
            ticked = json.loads(ws.receive_text())
            assert ticked["snake"][0] == [10, 11]

    def test_mode_change_pushed(self, tc):
        session_id = _create_session(tc)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "mode_pass_through"}))
            state = json.loads(ws.receive_text())
            assert state["mode"] == "pass_through"
            assert state["status"] == "idle"

    def test_garbage_ignored(self, tc):
        session_id = _create_session(tc)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text("not json")
            ws.send_text(json.dumps(["start"]))
            ws.send_text(json.dumps({"command": 5}))
            ws.send_text(json.dumps({"command": "jump"}))
            ws.send_text(json.dumps({"command": "mode_pass_through"}))
            # Only the valid command produces a snapshot.
            state = json.loads(ws.receive_text())
            assert state["mode"] == "pass_through"

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ) as ws:
            ws.receive_text()


class TestClosedSessionSocket:
    def test_deleted_session_stops_serving(self, tc):
        session_id = _create_session(tc)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            assert tc.delete(f"/sessions/{session_id}").status_code == 204
            ws.send_text(json.dumps({"command": "start"}))
            with pytest.raises(WebSocketDisconnect) as exc_info:
                ws.receive_text()
            assert exc_info.value.code == 4004

    def test_evicted_session_stops_serving(self):
        with TestClient(create_app(max_sessions=1)) as client:
            first = _create_session(client)
            with client.websocket_connect(f"/sessions/{first}/play") as ws:
                ws.receive_text()
                _create_session(client)
                ws.send_text(json.dumps({"command": "start"}))
                with pytest.raises(WebSocketDisconnect):
                    ws.receive_text()
            assert client.get(f"/sessions/{first}").status_code == 404
