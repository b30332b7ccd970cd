"""FastAPI service for VTG conversion and the aggregate navigation record.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

HTTP endpoints decode and encode single GPVTG sentences, and feed framed
sentences into a long-lived aggregate navigation record. WebSocket clients
connect to ``ws://<host>:8000/ws`` and receive one ``type="info"`` JSON
snapshot of the aggregate after every accepted sentence.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Response, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from nmeanav.nmea import (
    SentenceError,
    VTGData,
    generate_vtg,
    parse_vtg,
    vtg_from_info,
)
from server.formatters import format_info_message, format_vtg_message
from server.hub import NavigationHub

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_JSON_MEDIA_TYPE = "application/json"

hub = NavigationHub()


class SentenceRequest(BaseModel):
    sentence: str


class VTGRequest(BaseModel):
    """Record to encode; groups left out are absent."""

    track_true_degrees: float = 0.0
    track_true_unit: str = ""
    track_magnetic_degrees: float = 0.0
    track_magnetic_unit: str = ""
    speed_knots: float = 0.0
    speed_knots_unit: str = ""
    speed_kilometers_per_hour: float = 0.0
    speed_kilometers_per_hour_unit: str = ""


def _json_response(content: str) -> Response:
    return Response(content=content, media_type=_JSON_MEDIA_TYPE)


def _generate_sentence(vtg: VTGData | None) -> str:
    """Encode ``vtg``, answering 422 when the sentence cannot be framed."""
    try:
        return generate_vtg(vtg)
    except SentenceError as error:
        raise HTTPException(status_code=422, detail=str(error)) from error


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    hub.attach(asyncio.get_running_loop())
    yield
    hub.detach()


app = FastAPI(lifespan=_lifespan)


@app.post("/vtg/decode")
def decode_vtg(request: SentenceRequest) -> Response:
    """Decode one GPVTG sentence; the checksum is not verified."""
    vtg = parse_vtg(request.sentence)
    if vtg is None:
        raise HTTPException(status_code=422, detail="Invalid GPVTG sentence")
    return _json_response(format_vtg_message(vtg))


@app.post("/vtg/encode")
def encode_vtg(request: VTGRequest) -> dict[str, str]:
    """Encode a VTG record as a framed GPVTG sentence."""
    try:
        vtg = VTGData(**request.model_dump())
    except ValueError as error:
        raise HTTPException(status_code=422, detail=str(error)) from error
    return {"sentence": _generate_sentence(vtg)}


@app.post("/sentences")
def ingest_sentence(request: SentenceRequest) -> Response:
    """Merge a checksummed GPVTG sentence into the aggregate record."""
    info = hub.ingest(request.sentence)
    if info is None:
        raise HTTPException(
            status_code=422,
            detail="Rejected sentence: bad checksum or invalid GPVTG",
        )
    return _json_response(format_info_message(info))


@app.get("/info")
def get_info() -> Response:
    return _json_response(format_info_message(hub.snapshot()))


@app.delete("/info", status_code=204)
def reset_info() -> Response:
    hub.reset()
    return Response(status_code=204)


@app.get("/info/vtg")
def get_info_vtg() -> dict[str, str]:
    """Project the aggregate record back onto a GPVTG sentence."""
    return {"sentence": _generate_sentence(vtg_from_info(hub.snapshot()))}


async def _forward_queue_to_websocket(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream aggregate snapshots to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full. The connection
    closes with code 1001 if no sentence is accepted within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    hub.subscribe(queue)
    try:
        await websocket.accept()
        await _forward_queue_to_websocket(queue, websocket)
    finally:
        hub.unsubscribe(queue)
