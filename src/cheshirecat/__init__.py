"""Cheshire Cat Python SDK - async client for the Cheshire Cat REST and WebSocket APIs."""

__version__ = "1.0.0"

from cheshirecat.client import CheshireCatClient
from cheshirecat.client import create_client
from cheshirecat.client import create_client_from_env
from cheshirecat.errors import CheshireCatAPIError
from cheshirecat.errors import CheshireCatAuthenticationError
from cheshirecat.errors import CheshireCatConfigurationError
from cheshirecat.errors import CheshireCatConnectionError
from cheshirecat.errors import CheshireCatError
from cheshirecat.errors import CheshireCatFileUploadError
from cheshirecat.errors import CheshireCatNotFoundError
from cheshirecat.errors import CheshireCatValidationError
from cheshirecat.errors import CheshireCatWebSocketError
from cheshirecat.errors import ErrorKind
from cheshirecat.models import ClientConfig
from cheshirecat.models import HTTPConfig
from cheshirecat.models import UploadPart
from cheshirecat.models import WebSocketConfig
from cheshirecat.websocket import CheshireCatWebSocket
from cheshirecat.websocket import WebSocketState

__all__ = [
    "CheshireCatAPIError",
    "CheshireCatAuthenticationError",
    "CheshireCatClient",
    "CheshireCatConfigurationError",
    "CheshireCatConnectionError",
    "CheshireCatError",
    "CheshireCatFileUploadError",
    "CheshireCatNotFoundError",
    "CheshireCatValidationError",
    "CheshireCatWebSocket",
    "CheshireCatWebSocketError",
    "ClientConfig",
    "ErrorKind",
    "HTTPConfig",
    "UploadPart",
    "WebSocketConfig",
    "WebSocketState",
    "create_client",
    "create_client_from_env",
    "__version__",
]
