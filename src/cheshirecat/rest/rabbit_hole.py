"""Rabbit hole (document ingestion) REST API."""

from __future__ import annotations

import json
import logging
import os
from typing import Any
from typing import Dict
from typing import Optional

import httpx

from cheshirecat.errors import CheshireCatFileUploadError
from cheshirecat.models import DEFAULT_CHUNK_SIZE
from cheshirecat.models import UploadPart
from cheshirecat.rest.base import BaseAPI

logger = logging.getLogger(__name__)


class RabbitHoleAPI(BaseAPI):
    """Document upload endpoint."""

    async def upload_file(
        self,
        file_path: str,
        file_name: str,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> httpx.Response:
        """Upload a local file to be chunked and stored in memory.

        The file is checked before any request is made and streamed from
        disk as the ``file`` part, alongside ``chunk_size`` and a JSON
        encoded ``metadata`` field.

        Args:
            file_path: Path of the local file
            file_name: Filename reported to the service
            content_type: MIME type of the file, guessed by httpx when unset
            metadata: Metadata stored with every chunk
            chunk_size: Chunk size used by the ingestion pipeline

        Returns:
            HTTP response

        Raises:
            CheshireCatFileUploadError: The file is missing or unreadable
        """
        if not os.path.exists(file_path):
            raise CheshireCatFileUploadError(f"File does not exist: {file_path}")
        if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
            raise CheshireCatFileUploadError(f"File is not readable: {file_path}")

        try:
            stream = open(file_path, "rb")
        except OSError as e:
            raise CheshireCatFileUploadError(f"File is not readable: {file_path}", cause=e) from e

        logger.debug(f"Uploading {file_path} as {file_name}")
        with stream:
            parts = [
                UploadPart(name="file", contents=stream, filename=file_name, content_type=content_type),
                UploadPart(name="chunk_size", contents=str(chunk_size)),
                UploadPart(
                    name="metadata",
                    contents=json.dumps(metadata or {}, separators=(",", ":")),
                ),
            ]
            return await self._post_multipart("/rabbithole/", parts)
