"""aiohttp WebSocket transport for the signaling hub.

Frames are JSON text in both directions::

    {"event": "join-room", "data": {"roomCode": "R1", "peerId": "a", ...}}
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from aiohttp import WSMsgType, web

from signalkit.transport.base import Connection

if TYPE_CHECKING:
    from signalkit.core.hub import SignalingHub

logger = logging.getLogger("signalkit.transport")

WebSocketHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def parse_frame(raw: str | bytes) -> tuple[str, Any] | None:
    """Split a raw frame into ``(event, data)``.

    Returns ``None`` for anything that is not a JSON object carrying a
    string ``event`` key.
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        frame = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug("Failed to parse frame: %s", e)
        return None

    if not isinstance(frame, dict):
        return None
    event = frame.get("event")
    if not isinstance(event, str):
        return None
    return event, frame.get("data")


class WebSocketConnection(Connection):
    """A hub connection backed by an aiohttp ``WebSocketResponse``.

    Outbound events go through an unbounded outbox drained by a background
    task, so ``send`` never suspends the caller.
    """

    def __init__(self, ws: web.WebSocketResponse, connection_id: str | None = None) -> None:
        super().__init__(connection_id)
        self._ws = ws
        self._outbox: asyncio.Queue[tuple[str, Any]] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None
        self._stopped = False

    @property
    def closed(self) -> bool:
        return self._stopped or self._ws.closed

    def send(self, event: str, data: Any) -> None:
        if self.closed:
            return
        self._outbox.put_nowait((event, data))

    def start(self) -> None:
        """Start the background task that drains the outbox."""
        self._task = asyncio.create_task(self._run())

    async def close(self) -> None:
        """Stop draining and close the socket."""
        self._stopped = True
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        if not self._ws.closed:
            await self._ws.close()

    async def _run(self) -> None:
        while not self._stopped:
            event, data = await self._outbox.get()
            try:
                await self._ws.send_json({"event": event, "data": data})
            except (ConnectionError, RuntimeError) as e:
                # Peer went away mid-send; the read loop will report the close.
                logger.debug("Dropping %s for connection %s: %s", event, self.id, e)


def make_websocket_handler(
    hub: SignalingHub,
    *,
    heartbeat: float | None = 25.0,
    receive_timeout: float | None = 60.0,
) -> WebSocketHandler:
    """Create an aiohttp handler that attaches each WebSocket to *hub*.

    Args:
        hub: The hub that owns room state.
        heartbeat: Interval between ping frames in seconds.
        receive_timeout: Close the connection when nothing (including pongs)
            arrives for this many seconds.
    """

    async def websocket_handler(request: web.Request) -> web.StreamResponse:
        ws = web.WebSocketResponse(heartbeat=heartbeat, receive_timeout=receive_timeout)
        await ws.prepare(request)

        connection = WebSocketConnection(ws)
        connection.start()
        hub.connect(connection)
        reason = "client disconnect"
        try:
            async for msg in ws:
                if msg.type == WSMsgType.TEXT:
                    frame = parse_frame(msg.data)
                    if frame is None:
                        continue
                    event, data = frame
                    hub.dispatch(connection, event, data)
                elif msg.type == WSMsgType.ERROR:
                    reason = f"transport error: {ws.exception()}"
        except TimeoutError:
            reason = "ping timeout"
        finally:
            hub.disconnect(connection, reason)
            await connection.close()
        return ws

    return websocket_handler
