"""Test configuration and fixtures."""

from typing import Any
from typing import List
from typing import Optional

import httpx
import pytest
import websockets

from cheshirecat.client import CheshireCatClient
from cheshirecat.models import ClientConfig
from cheshirecat.models import HTTPConfig
from cheshirecat.models import WebSocketConfig

ENV_VARS = [
    "CHESHIRE_CAT_BASE_URI",
    "CHESHIRE_CAT_WS_BASE_URI",
    "CHESHIRE_CAT_API_KEY",
    "CHESHIRE_CAT_TIMEOUT",
    "CHESHIRE_CAT_USER_AGENT",
    "CHESHIRE_CAT_WS_RECEIVE_TIMEOUT",
    "CHESHIRE_CAT_LOG_LEVEL",
]


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json: Any = {"status": "We're all mad here, dear!"}
        self.exception: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def http_config():
    """HTTP configuration fixture."""
    return HTTPConfig(base_url="http://cat.test/", api_key="meow")


@pytest.fixture
def recorder():
    """Request recorder fixture."""
    return RecordingHandler()


@pytest.fixture
def transport(recorder):
    """Mock transport fixture."""
    return httpx.MockTransport(recorder)


@pytest.fixture
async def cat(http_config, transport):
    """Client fixture backed by the mock transport."""
    client = CheshireCatClient(ClientConfig(http=http_config), transport=transport)
    yield client
    await client.close()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SDK variables from the environment for the duration of a test."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


# WebSocket test helpers
async def _echo(websocket):
    async for message in websocket:
        await websocket.send(message)


async def _silent(websocket):
    async for _ in websocket:
        pass


async def _going_away(websocket):
    await websocket.close(1001, "going away")


async def _serve(handler):
    server = await websockets.serve(handler, "127.0.0.1", 0)
    port = list(server.sockets)[0].getsockname()[1]
    return server, f"ws://127.0.0.1:{port}/ws"


@pytest.fixture
async def echo_server():
    """Local echo WebSocket endpoint, yields its URL."""
    server, url = await _serve(_echo)
    yield url
    server.close()
    await server.wait_closed()


@pytest.fixture
async def silent_server():
    """WebSocket endpoint that never replies."""
    server, url = await _serve(_silent)
    yield url
    server.close()
    await server.wait_closed()


@pytest.fixture
async def closing_server():
    """WebSocket endpoint that closes every connection right away."""
    server, url = await _serve(_going_away)
    yield url
    server.close()
    await server.wait_closed()


@pytest.fixture
def ws_config(echo_server):
    """WebSocket configuration pointing at the echo server."""
    return WebSocketConfig(url=echo_server, open_timeout=5.0)
