"""WebSocket session for the Cheshire Cat chat endpoint."""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Any
from typing import Optional

import websockets
from pydantic import BaseModel
from websockets.exceptions import ConnectionClosed
from websockets.exceptions import WebSocketException

from cheshirecat.errors import CheshireCatWebSocketError
from cheshirecat.models import WebSocketConfig

logger = logging.getLogger(__name__)


class WebSocketState(str, Enum):
    """Session lifecycle state."""
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class CheshireCatWebSocket:
    """Single persistent WebSocket connection exchanging JSON messages.

    The session moves from ``UNOPENED`` to ``OPEN`` to ``CLOSED`` and never
    reconnects. Requests and replies are paired by position: send one
    message, then receive one. A session has a single owner and must not
    be used from concurrent tasks without external serialization.

    Example:
        ```python
        async with CheshireCatWebSocket(WebSocketConfig()) as ws:
            await ws.send({"text": "Hello"})
            reply = await ws.receive(timeout=30)
        ```
    """

    def __init__(self, config: WebSocketConfig) -> None:
        """Initialize WebSocket session.

        Args:
            config: WebSocket configuration
        """
        self.config = config
        self._connection: Optional[Any] = None
        self._state = WebSocketState.UNOPENED

    async def __aenter__(self) -> CheshireCatWebSocket:
        """Async context manager entry."""
        await self.open()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def state(self) -> WebSocketState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_open(self) -> bool:
        """Check if the session is open."""
        return self._state is WebSocketState.OPEN

    async def open(self) -> None:
        """Connect to the WebSocket endpoint.

        Opening an already open session is a no-op.

        Raises:
            CheshireCatWebSocketError: Session closed or connection failed
        """
        if self._state is WebSocketState.OPEN:
            return
        if self._state is WebSocketState.CLOSED:
            raise CheshireCatWebSocketError("WebSocket session is closed")

        uri = self.config.url
        logger.info(f"Connecting to WebSocket: {uri}")
        try:
            self._connection = await websockets.connect(
                uri,
                open_timeout=self.config.open_timeout,
                ping_interval=self.config.ping_interval,
                ping_timeout=self.config.ping_timeout,
                max_size=self.config.max_message_size,
            )
        except (WebSocketException, OSError, asyncio.TimeoutError) as e:
            self._connection = None
            logger.error(f"Failed to connect to WebSocket: {e}")
            raise CheshireCatWebSocketError(f"Connection failed: {e}", cause=e) from e

        self._state = WebSocketState.OPEN
        logger.info("WebSocket connected successfully")

    async def send(self, payload: Any) -> None:
        """Send one JSON message.

        Opens the session on first use.

        Args:
            payload: JSON-serializable value or pydantic model

        Raises:
            CheshireCatWebSocketError: Payload not JSON serializable, session
                closed or transport error
        """
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", exclude_none=True)
        try:
            message = json.dumps(payload)
        except (TypeError, ValueError) as e:
            raise CheshireCatWebSocketError(f"Error sending message: {e}", cause=e) from e

        await self._ensure_open()

        try:
            await self._connection.send(message)
        except ConnectionClosed as e:
            self._mark_closed()
            raise self._closed_error("Error sending message", e) from e
        except (WebSocketException, OSError) as e:
            raise CheshireCatWebSocketError(f"Error sending message: {e}", cause=e) from e

        logger.debug(f"Sent message ({len(message)} chars)")

    async def receive(self, timeout: Optional[float] = None) -> Any:
        """Wait for one message and decode it as JSON.

        Opens the session on first use.

        Args:
            timeout: Seconds to wait, defaults to ``config.receive_timeout``;
                waits indefinitely when both are unset

        Returns:
            Decoded JSON message

        Raises:
            CheshireCatWebSocketError: Session closed, timeout, transport
                error or a frame that is not JSON
        """
        await self._ensure_open()

        if timeout is None:
            timeout = self.config.receive_timeout

        try:
            if timeout is None:
                message = await self._connection.recv()
            else:
                message = await asyncio.wait_for(self._connection.recv(), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise CheshireCatWebSocketError(
                f"Error receiving message: no message within {timeout}s", cause=e
            ) from e
        except ConnectionClosed as e:
            self._mark_closed()
            raise self._closed_error("Error receiving message", e) from e
        except (WebSocketException, OSError) as e:
            raise CheshireCatWebSocketError(f"Error receiving message: {e}", cause=e) from e

        try:
            return json.loads(message)
        except ValueError as e:
            raise CheshireCatWebSocketError(f"Invalid JSON received: {e}", cause=e) from e

    async def close(self) -> None:
        """Send a close frame and release the connection.

        Closing a session that is already closed, or was never opened, is a
        no-op apart from marking it closed.

        Raises:
            CheshireCatWebSocketError: Closing handshake failed
        """
        if self._state is WebSocketState.CLOSED:
            return

        connection = self._connection
        self._mark_closed()
        if connection is None:
            return

        try:
            await connection.close()
        except (WebSocketException, OSError) as e:
            raise CheshireCatWebSocketError(f"Error closing connection: {e}", cause=e) from e

        logger.info("WebSocket disconnected")

    async def _ensure_open(self) -> None:
        if self._state is WebSocketState.CLOSED:
            raise CheshireCatWebSocketError("WebSocket session is closed")
        if self._state is WebSocketState.UNOPENED:
            await self.open()

    def _mark_closed(self) -> None:
        self._state = WebSocketState.CLOSED
        self._connection = None

    @staticmethod
    def _closed_error(action: str, exc: ConnectionClosed) -> CheshireCatWebSocketError:
        frame = exc.rcvd or exc.sent
        return CheshireCatWebSocketError(
            f"{action}: connection closed",
            code=getattr(frame, "code", None),
            reason=getattr(frame, "reason", None) or None,
            cause=exc,
        )
