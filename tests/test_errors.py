"""Tests for the exception hierarchy."""

import httpx
import pytest

from cheshirecat.errors import CheshireCatAPIError
from cheshirecat.errors import CheshireCatConnectionError
from cheshirecat.errors import CheshireCatError
from cheshirecat.errors import CheshireCatFileUploadError
from cheshirecat.errors import CheshireCatValidationError
from cheshirecat.errors import CheshireCatWebSocketError
from cheshirecat.errors import ErrorKind
from cheshirecat.errors import map_transport_error


def _status_error(status_code, **kwargs):
    request = httpx.Request("POST", "http://cat.test/users/")
    response = httpx.Response(status_code, request=request, **kwargs)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestErrorHierarchy:
    """Test error classes."""

    def test_all_errors_share_base(self):
        """Test every typed error is a CheshireCatError."""
        for error in (
            CheshireCatConnectionError(),
            CheshireCatFileUploadError("File does not exist: /tmp/x"),
            CheshireCatWebSocketError("Send failed"),
        ):
            assert isinstance(error, CheshireCatError)

    def test_default_messages(self):
        """Test default messages per kind."""
        assert str(CheshireCatConnectionError()) == "API connection failed"
        assert str(CheshireCatAPIError()) == "API request failed"

    def test_repr(self):
        """Test detailed representation."""
        error = CheshireCatValidationError(status_code=422, details={"detail": "bad"})
        assert repr(error) == (
            "CheshireCatValidationError(kind='validation', message='Validation error', "
            "status_code=422, details={'detail': 'bad'})"
        )

    def test_websocket_error_str(self):
        """Test WebSocket error string with close code and reason."""
        error = CheshireCatWebSocketError("Error receiving message", code=1001, reason="going away")
        assert str(error) == "Error receiving message (code: 1001, reason: going away)"
        assert error.kind == ErrorKind.WEBSOCKET


class TestMapTransportError:
    """Test translation of httpx failures."""

    def test_validation_details(self):
        """Test 422 bodies are kept as details."""
        exc = _status_error(422, json={"detail": [{"loc": ["body", "username"], "msg": "field required"}]})

        error = map_transport_error(exc)

        assert isinstance(error, CheshireCatValidationError)
        assert error.details["detail"][0]["msg"] == "field required"
        assert error.cause is exc

    def test_json_body_without_detail(self):
        """Test JSON error bodies without a detail key are kept whole."""
        error = map_transport_error(_status_error(500, json={"error": "kaboom"}))
        assert error.details == {"error": "kaboom"}

    def test_request_error(self):
        """Test response-less errors become connection errors."""
        exc = httpx.ConnectError("Name or service not known")
        assert isinstance(map_transport_error(exc), CheshireCatConnectionError)

    def test_unknown_error(self):
        """Test anything else becomes a generic error."""
        error = map_transport_error(RuntimeError("unexpected"))
        assert isinstance(error, CheshireCatAPIError)
        assert error.status_code is None

    @pytest.mark.parametrize("status_code", [402, 409, 429, 502])
    def test_other_statuses_are_generic(self, status_code):
        """Test statuses without a dedicated kind."""
        error = map_transport_error(_status_error(status_code))
        assert error.kind == ErrorKind.GENERIC
        assert error.status_code == status_code
