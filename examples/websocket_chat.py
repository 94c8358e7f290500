"""Chat with the cat over its WebSocket endpoint."""

import asyncio
import logging

from cheshirecat import CheshireCatWebSocket
from cheshirecat import CheshireCatWebSocketError
from cheshirecat import create_client_from_env
from cheshirecat.models import WebSocketConfig


async def chat_with_client():
    """Send one message and wait for one reply using the client facade."""

    async with create_client_from_env() as client:
        reply = await client.send_message_via_websocket({"text": "Who are you?"}, timeout=30)
        print(f"Cat says: {reply}")


async def chat_session():
    """Hold a session open for several exchanges."""

    config = WebSocketConfig(url="ws://localhost:1865/ws", receive_timeout=30)
    try:
        async with CheshireCatWebSocket(config) as session:
            for text in ["Hello!", "Where should I go?", "Goodbye"]:
                await session.send({"text": text})
                reply = await session.receive()
                print(f"> {text}\n< {reply}")
    except CheshireCatWebSocketError as e:
        print(f"WebSocket error: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(chat_with_client())
    asyncio.run(chat_session())
