"""Pydantic models for Cheshire Cat SDK configuration and payloads."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Union
from urllib.parse import urlparse

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


DEFAULT_BASE_URL = "http://localhost:1865/"
DEFAULT_WS_URL = "ws://localhost:1865/ws"
DEFAULT_USER_AGENT = "cheshire-cat-python-sdk/1.0.0"
DEFAULT_CHUNK_SIZE = 128


class CheshireCatBaseModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name and alias
        populate_by_name=True,
        # Forbid extra fields unless explicitly allowed
        extra="forbid",
    )


class PayloadModel(CheshireCatBaseModel):
    """Base for request bodies; the service may accept fields we don't model."""

    model_config = ConfigDict(extra="allow")


# ============================================================================
# Configuration Models
# ============================================================================

def _check_url(value: str, schemes: tuple) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in schemes or not parsed.netloc:
        raise ValueError(f"expected an absolute {'/'.join(schemes)} URL, got {value!r}")
    return value


class HTTPConfig(CheshireCatBaseModel):
    """HTTP client configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(DEFAULT_BASE_URL, description="Base API URL")
    api_key: str = Field("", description="API key sent as bearer token", repr=False)
    timeout: Optional[float] = Field(
        None, description="Request timeout in seconds, httpx default when unset"
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User agent string")

    @field_validator("base_url")
    @classmethod
    def _absolute_http_url(cls, value: str) -> str:
        return _check_url(value, ("http", "https"))


class WebSocketConfig(CheshireCatBaseModel):
    """WebSocket session configuration."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(DEFAULT_WS_URL, description="WebSocket URL")
    receive_timeout: Optional[float] = Field(
        None, description="Default receive timeout in seconds, unbounded when unset"
    )
    open_timeout: Optional[float] = Field(10.0, description="Handshake timeout in seconds")
    ping_interval: Optional[float] = Field(20.0, description="Ping interval in seconds")
    ping_timeout: Optional[float] = Field(20.0, description="Ping timeout in seconds")
    max_message_size: Optional[int] = Field(1024 * 1024, description="Maximum message size in bytes")

    @field_validator("url")
    @classmethod
    def _absolute_ws_url(cls, value: str) -> str:
        return _check_url(value, ("ws", "wss"))


class ClientConfig(CheshireCatBaseModel):
    """Cheshire Cat client configuration."""

    model_config = ConfigDict(frozen=True)

    http: HTTPConfig = Field(default_factory=HTTPConfig, description="HTTP configuration")
    websocket: WebSocketConfig = Field(
        default_factory=WebSocketConfig, description="WebSocket configuration"
    )
    log_level: Optional[str] = Field(None, description="Level for the cheshirecat logger")


# ============================================================================
# Multipart Models
# ============================================================================

class UploadPart(CheshireCatBaseModel):
    """One named part of a multipart request body."""

    name: str = Field(..., description="Form field name")
    contents: Any = Field(..., description="Field value, bytes or binary file stream")
    filename: Optional[str] = Field(None, description="Filename for file parts")
    content_type: Optional[str] = Field(None, description="Content type for file parts")

    @property
    def is_field(self) -> bool:
        """Whether this part is sent as a plain form field."""
        if self.filename is not None:
            return False
        return not isinstance(self.contents, (bytes, bytearray)) and not hasattr(self.contents, "read")


# ============================================================================
# Payload Models
# ============================================================================

class MessagePayload(PayloadModel):
    """Chat message sent to the cat."""
    text: str = Field(..., description="Message text")


class TokenRequest(PayloadModel):
    """Credentials exchanged for a JWT."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password", repr=False)


class UserCreate(PayloadModel):
    """New user."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password", repr=False)
    permissions: Optional[Dict[str, List[str]]] = Field(None, description="Permissions per resource")


class UserUpdate(PayloadModel):
    """Partial user update."""
    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password", repr=False)
    permissions: Optional[Dict[str, List[str]]] = Field(None, description="Permissions per resource")


class SettingPayload(PayloadModel):
    """Setting create/update body."""
    name: str = Field(..., description="Setting name")
    value: Any = Field(..., description="Setting value")
    category: Optional[str] = Field(None, description="Setting category")


class MemoryPointPayload(PayloadModel):
    """Memory point create body."""
    content: str = Field(..., description="Text content of the point")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Point metadata")


JSONPayload = Union[Dict[str, Any], BaseModel]
AnyPart = Union[UploadPart, Dict[str, Any]]


def dump_payload(payload: JSONPayload) -> Dict[str, Any]:
    """Convert a payload into a JSON-serializable mapping.

    Args:
        payload: Plain mapping or pydantic model

    Returns:
        Mapping ready for JSON encoding
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_none=True, by_alias=True)
    return dict(payload)
