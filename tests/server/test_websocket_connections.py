"""Tests for websocket concurrency and connection lifecycle."""

import asyncio
import json

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.formatters import format_info_message
from server.hub import NavigationHub, _enqueue_message
from server.main import _forward_queue_to_websocket, app, hub
from tests.server.helpers import full_vtg, track_only_vtg


def test_multiple_clients() -> None:
    with (
        TestClient(app) as client,
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        client.post("/sentences", json={"sentence": full_vtg()})
        assert socket_one.receive_json()["type"] == "info"
        assert socket_two.receive_json()["type"] == "info"


def test_subscriber_removed_after_close(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.05)
    with TestClient(app) as client:
        with (
            pytest.raises(WebSocketDisconnect),
            client.websocket_connect("/ws") as websocket,
        ):
            websocket.receive_json()
        response = client.post("/sentences", json={"sentence": full_vtg()})
        assert response.status_code == 200
    assert hub._subscribers == []


def test_overflowed_queue_keeps_newest_snapshots() -> None:
    navigation_hub = NavigationHub()
    tracks_in = ["10.0", "20.0", "30.0"]
    snapshots = [navigation_hub.ingest(track_only_vtg(track)) for track in tracks_in]
    message_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=2)
    for snapshot in snapshots:
        assert snapshot is not None
        _enqueue_message(message_queue, format_info_message(snapshot))

    tracks = [
        json.loads(message_queue.get_nowait())["track_true_degrees"]
        for _ in range(message_queue.qsize())
    ]
    assert tracks == [20.0, 30.0]


def test_idle_client_closed_after_last_snapshot(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.5)
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        client.post("/sentences", json={"sentence": full_vtg()})
        assert websocket.receive_json()["present"] == [
            "MTRACK",
            "SMASK",
            "SPEED",
            "TRACK",
        ]
        with pytest.raises(WebSocketDisconnect) as exc_info:
            websocket.receive_json()
        assert exc_info.value.code == 1001


def test_client_gone_while_forwarding_snapshot() -> None:
    sent: list[str] = []

    class DepartedWebSocket:
        async def send_text(self, text: str) -> None:
            sent.append(text)
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        message_queue: asyncio.Queue[str] = asyncio.Queue()
        snapshot = NavigationHub().ingest(full_vtg())
        assert snapshot is not None
        message_queue.put_nowait(format_info_message(snapshot))
        websocket = DepartedWebSocket()
        await _forward_queue_to_websocket(message_queue, websocket)  # type: ignore[arg-type]

    asyncio.run(_run())
    assert json.loads(sent[0])["type"] == "info"
