"""Owns the service's aggregate navigation record and its subscribers.

Merges arrive from FastAPI's worker threads, so every read and write of
the aggregate goes through one lock. Subscriber queues belong to the event
loop; messages are handed over with ``call_soon_threadsafe``.
"""

import asyncio
import dataclasses
import logging
import threading

from nmeanav.info import NavigationInfo
from nmeanav.nmea import parse_vtg, validate_checksum, vtg_to_info
from server.formatters import format_info_message

__all__ = ["NavigationHub"]

logger = logging.getLogger(__name__)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class NavigationHub:
    """Aggregate navigation record fed by incoming sentences.

    Each accepted sentence is merged into the record, and a JSON snapshot
    of the result is pushed to every subscriber queue. A full queue drops
    its oldest message so slow WebSocket clients never block a merge.
    """

    def __init__(self) -> None:
        self._info = NavigationInfo()
        self._lock = threading.Lock()
        self._subscribers: list[asyncio.Queue[str]] = []
        self._loop: asyncio.AbstractEventLoop | None = None

    def attach(self, loop: asyncio.AbstractEventLoop) -> None:
        """Deliver subscriber messages on ``loop`` from now on."""
        self._loop = loop

    def detach(self) -> None:
        self._loop = None

    def subscribe(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.append(queue)

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.remove(queue)

    def ingest(self, sentence: str) -> NavigationInfo | None:
        """Verify, decode and merge one framed sentence.

        Returns:
            A snapshot of the aggregate after the merge, or None if the
            checksum is wrong or the sentence is not a valid GPVTG.
        """
        if not validate_checksum(sentence):
            logger.warning("Rejected sentence with bad checksum: %r", sentence)
            return None

        vtg = parse_vtg(sentence)
        if vtg is None:
            return None

        with self._lock:
            vtg_to_info(vtg, self._info)
            snapshot = dataclasses.replace(self._info)

        self._broadcast(format_info_message(snapshot))
        return snapshot

    def snapshot(self) -> NavigationInfo:
        """Return a copy of the aggregate record."""
        with self._lock:
            return dataclasses.replace(self._info)

    def reset(self) -> None:
        """Start over with an empty aggregate record."""
        with self._lock:
            self._info = NavigationInfo()

    def _broadcast(self, message: str) -> None:
        loop = self._loop
        if loop is None:
            return
        for queue in list(self._subscribers):
            loop.call_soon_threadsafe(_enqueue_message, queue, message)
