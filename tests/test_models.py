"""Tests for pydantic models."""

import io

import pytest
from pydantic import ValidationError

from cheshirecat.models import ClientConfig
from cheshirecat.models import HTTPConfig
from cheshirecat.models import MessagePayload
from cheshirecat.models import SettingPayload
from cheshirecat.models import TokenRequest
from cheshirecat.models import UploadPart
from cheshirecat.models import UserUpdate
from cheshirecat.models import WebSocketConfig
from cheshirecat.models import dump_payload


class TestConfigurationModels:
    """Test configuration models."""

    def test_http_config_defaults(self):
        """Test HTTPConfig defaults."""
        config = HTTPConfig()
        assert config.base_url == "http://localhost:1865/"
        assert config.api_key == ""
        assert config.timeout is None

    @pytest.mark.parametrize("base_url", ["localhost:1865", "/relative", "ws://localhost:1865/", ""])
    def test_http_config_rejects_invalid_url(self, base_url):
        """Test base URL validation."""
        with pytest.raises(ValidationError):
            HTTPConfig(base_url=base_url)

    def test_api_key_hidden_from_repr(self):
        """Test the API key is not in repr."""
        config = HTTPConfig(api_key="super_secret_key")
        assert "super_secret_key" not in repr(config)

    def test_http_config_is_frozen(self):
        """Test configuration is immutable after construction."""
        config = HTTPConfig()
        with pytest.raises(ValidationError):
            config.api_key = "changed"

    def test_websocket_config(self):
        """Test WebSocketConfig defaults and validation."""
        config = WebSocketConfig()
        assert config.url == "ws://localhost:1865/ws"
        assert config.receive_timeout is None

        assert WebSocketConfig(url="wss://cat.example.com/ws").url == "wss://cat.example.com/ws"
        with pytest.raises(ValidationError):
            WebSocketConfig(url="https://cat.example.com/ws")

    def test_extra_fields_forbidden(self):
        """Test unknown configuration keys are rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(http=HTTPConfig(), retries=3)


class TestUploadPart:
    """Test multipart part model."""

    def test_string_without_filename_is_field(self):
        assert UploadPart(name="chunk_size", contents="128").is_field
        assert UploadPart(name="chunk_size", contents=128).is_field

    def test_file_parts(self):
        assert not UploadPart(name="file", contents="text", filename="a.txt").is_field
        assert not UploadPart(name="file", contents=b"bytes").is_field
        assert not UploadPart(name="file", contents=io.BytesIO(b"stream")).is_field


class TestPayloadModels:
    """Test request payload models."""

    def test_dump_model(self):
        """Test None fields are dropped."""
        assert dump_payload(UserUpdate(username="alice")) == {"username": "alice"}

    def test_dump_mapping(self):
        """Test mappings are copied."""
        payload = {"text": "hi"}
        dumped = dump_payload(payload)
        assert dumped == payload
        assert dumped is not payload

    def test_extra_fields_allowed(self):
        """Test payloads can carry fields the SDK does not model."""
        message = MessagePayload(text="hi", prompt_settings={"temperature": 0})
        assert dump_payload(message) == {"text": "hi", "prompt_settings": {"temperature": 0}}

    def test_setting_value_any(self):
        """Test settings accept any JSON value."""
        setting = SettingPayload(name="llm", value={"model": "gpt"}, category="llm_factory")
        assert dump_payload(setting)["value"] == {"model": "gpt"}

    def test_password_hidden_from_repr(self):
        """Test passwords are not in repr."""
        assert "s3cret" not in repr(TokenRequest(username="admin", password="s3cret"))
