"""Basic usage examples for the Cheshire Cat Python SDK."""

import asyncio
import logging

from cheshirecat import CheshireCatClient
from cheshirecat import CheshireCatError
from cheshirecat import CheshireCatNotFoundError
from cheshirecat import create_client_from_env
from cheshirecat.models import MessagePayload
from cheshirecat.models import SettingPayload


async def basic_client_usage():
    """Demonstrate basic client usage."""

    client = CheshireCatClient(
        base_url="http://localhost:1865/",
        api_key="your_api_key_here",
        ws_url="ws://localhost:1865/ws",
    )

    async with client:
        status = await client.get_status()
        print(f"Status: {status.json()}")

        # List the first page of users
        users = await client.users.get_users(skip=0, limit=10)
        print(f"Users: {users.json()}")

        # Chat over HTTP
        reply = await client.send_message(MessagePayload(text="Hello, Cheshire Cat!"))
        print(f"Reply: {reply.json()}")


async def settings_and_memory():
    """Demonstrate settings and memory endpoints."""

    async with create_client_from_env() as client:
        created = await client.settings.create_setting(
            SettingPayload(name="greeting", value="Hello", category="custom")
        )
        setting_id = created.json()["setting"]["setting_id"]

        await client.settings.update_setting(setting_id, {"name": "greeting", "value": "Hi"})
        await client.settings.delete_setting(setting_id)

        points = await client.memory.get_memory_points("declarative", limit=20)
        print(f"Declarative memory: {points.json()}")


async def upload_document():
    """Demonstrate ingesting a file through the rabbit hole."""

    async with create_client_from_env() as client:
        try:
            response = await client.rabbit_hole.upload_file(
                "docs/alice.pdf",
                "alice.pdf",
                content_type="application/pdf",
                metadata={"source": "examples"},
            )
            print(f"Upload accepted: {response.json()}")
        except CheshireCatNotFoundError:
            print("Upload endpoint not found, check the base URL")
        except CheshireCatError as e:
            print(f"Upload failed: {e!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(basic_client_usage())
