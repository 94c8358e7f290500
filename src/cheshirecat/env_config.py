"""
Environment variable configuration loader for the Cheshire Cat SDK.

This module builds a :class:`~cheshirecat.models.ClientConfig` from
environment variables, so the same code can target a local development cat
or a hosted instance without changes.
"""

import logging
import os
from typing import Any
from typing import Dict
from typing import Optional

from pydantic import ValidationError

from cheshirecat.errors import CheshireCatConfigurationError
from cheshirecat.models import ClientConfig
from cheshirecat.models import HTTPConfig
from cheshirecat.models import WebSocketConfig

logger = logging.getLogger(__name__)


def load_config_from_env() -> ClientConfig:
    """
    Load SDK configuration from environment variables.

    Environment variables:
        CHESHIRE_CAT_BASE_URI: HTTP base URI (default: http://localhost:1865/)
        CHESHIRE_CAT_API_KEY: API key sent as bearer token
        CHESHIRE_CAT_TIMEOUT: HTTP timeout in seconds (default: httpx default)
        CHESHIRE_CAT_USER_AGENT: User agent string
        CHESHIRE_CAT_WS_BASE_URI: WebSocket URI (default: ws://localhost:1865/ws)
        CHESHIRE_CAT_WS_RECEIVE_TIMEOUT: Default WebSocket receive timeout in seconds
        CHESHIRE_CAT_LOG_LEVEL: Log level for the SDK logger (DEBUG/INFO/WARNING/ERROR)

    Returns:
        ClientConfig: Configuration object loaded from environment

    Raises:
        CheshireCatConfigurationError: A URI is not a valid absolute URL
    """
    http_values: Dict[str, Any] = {}
    ws_values: Dict[str, Any] = {}

    if base_uri := os.getenv("CHESHIRE_CAT_BASE_URI"):
        http_values["base_url"] = base_uri

    if api_key := os.getenv("CHESHIRE_CAT_API_KEY"):
        http_values["api_key"] = api_key

    timeout = _parse_float("CHESHIRE_CAT_TIMEOUT")
    if timeout is not None:
        http_values["timeout"] = timeout

    if user_agent := os.getenv("CHESHIRE_CAT_USER_AGENT"):
        http_values["user_agent"] = user_agent

    if ws_uri := os.getenv("CHESHIRE_CAT_WS_BASE_URI"):
        ws_values["url"] = ws_uri

    receive_timeout = _parse_float("CHESHIRE_CAT_WS_RECEIVE_TIMEOUT")
    if receive_timeout is not None:
        ws_values["receive_timeout"] = receive_timeout

    log_level = None
    if level := os.getenv("CHESHIRE_CAT_LOG_LEVEL"):
        log_level = level.upper()

    try:
        return ClientConfig(
            http=HTTPConfig(**http_values),
            websocket=WebSocketConfig(**ws_values),
            log_level=log_level,
        )
    except ValidationError as e:
        raise CheshireCatConfigurationError(f"Invalid environment configuration: {e}") from e


def _parse_float(name: str) -> Optional[float]:
    """Parse a float variable, keeping the default on invalid input."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid {name} value: {value}, using default")
        return None
